from .slug import derive_slug
from .files import collect_markdown_files
from .date_utils import today_iso, format_date, normalize_lastmod

__all__ = [
    "derive_slug", "collect_markdown_files",
    "today_iso", "format_date", "normalize_lastmod",
]

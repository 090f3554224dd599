from .url_entry import UrlEntry, CHANGEFREQ_VALUES
from .post import MarkdownDocument, PostMeta
from .build_result import BuildResult

__all__ = ["UrlEntry", "CHANGEFREQ_VALUES", "MarkdownDocument", "PostMeta", "BuildResult"]

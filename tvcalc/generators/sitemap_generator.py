"""
Generate sitemap.xml for SEO.
"""

from datetime import date
from html import escape
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

from ..config import (
    SiteConfig, SITEMAP_FILENAME, STATIC_ROUTES, POST_PRIORITY, UNTITLED_POST
)
from ..models import BuildResult, PostMeta, UrlEntry
from ..parsers import parse_front_matter, extract_title
from ..utils import derive_slug, normalize_lastmod, today_iso

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def read_post(path: Path) -> PostMeta:
    """
    Read one markdown file and work out its title, slug and date.

    Raises OSError/UnicodeDecodeError if the file cannot be read.
    """
    raw = Path(path).read_text(encoding="utf-8-sig")
    doc = parse_front_matter(raw)

    title = doc.get("title") or extract_title(doc.body) or UNTITLED_POST

    # A front matter slug is normalized too, so hand-written slugs can't break URLs
    slug = derive_slug(doc.get("slug") or title)

    post_date = doc.get("date")
    if post_date:
        normalized = normalize_lastmod(post_date)
        if normalized is None:
            logger.debug(f"Keeping unparseable date {post_date!r} in {path} as-is")
        else:
            post_date = normalized

    return PostMeta(title=title, slug=slug, source=Path(path), date=post_date)


def static_entries(today: Optional[date] = None) -> List[UrlEntry]:
    """Top-level routes that are always in the sitemap."""
    lastmod = today_iso(today)
    return [UrlEntry(url=path, lastmod=lastmod, priority=priority) for path, priority in STATIC_ROUTES]


def build_entries(
    files: Iterable[Path],
    today: Optional[date] = None,
    result: Optional[BuildResult] = None,
) -> List[UrlEntry]:
    """
    Build the full URL list: static routes first, then one entry per post.

    Files that cannot be read, and posts whose URL is already taken, are
    skipped with a warning. The first entry for a URL wins.
    """
    if result is None:
        result = BuildResult()

    entries = static_entries(today)
    seen: Set[str] = {entry.url for entry in entries}
    fallback_lastmod = today_iso(today)

    for path in files:
        try:
            post = read_post(path)
            entry = UrlEntry(url=post.url, lastmod=post.date or fallback_lastmod, priority=POST_PRIORITY)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            message = f"⚠️ Error processing file {path}: {e}"
            logger.warning(message)
            result.warn(message, path)
            continue

        if entry.url in seen:
            message = f"⚠️ Skipping {path}: URL {entry.url} is already in the sitemap"
            logger.warning(message)
            result.warn(message, path)
            continue

        seen.add(entry.url)
        entries.append(entry)

    return entries


def render_sitemap(entries: Iterable[UrlEntry], site_url: str) -> str:
    """Serialize URL entries into a sitemaps.org XML document."""
    xml = '<?xml version="1.0" encoding="UTF-8"?>\n'
    xml += f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n'

    for entry in entries:
        xml += '  <url>\n'
        xml += f'    <loc>{escape(entry.loc(site_url))}</loc>\n'
        if entry.lastmod:
            xml += f'    <lastmod>{escape(entry.lastmod)}</lastmod>\n'
        if entry.changefreq:
            xml += f'    <changefreq>{entry.changefreq}</changefreq>\n'
        if entry.priority is not None:
            xml += f'    <priority>{entry.priority_display}</priority>\n'
        xml += '  </url>\n'

    xml += '</urlset>\n'
    return xml


def build_sitemap(
    files: Iterable[Path],
    site_config: SiteConfig,
    today: Optional[date] = None,
    result: Optional[BuildResult] = None,
) -> Tuple[str, int]:
    """
    Build the sitemap document for the given markdown files.

    Returns (xml, url_count). Per-file problems are recorded on result.
    """
    entries = build_entries(files, today=today, result=result)
    if result is not None:
        result.entries = entries
    return render_sitemap(entries, site_config.site_url), len(entries)


def write_sitemap(xml: str, output_dir: Path) -> Path:
    """
    Write sitemap.xml into output_dir, creating the directory if needed.

    The document is written to a temporary file first and moved into place,
    so a failed write never leaves a truncated sitemap behind.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    output_path = output_dir / SITEMAP_FILENAME
    tmp_path = output_dir / f".{SITEMAP_FILENAME}.tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(xml)
        tmp_path.replace(output_path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()

    return output_path

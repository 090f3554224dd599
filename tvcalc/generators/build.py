"""
Sitemap/robots build orchestrator.
"""

from datetime import date
import logging
from typing import Optional

from ..config import SiteConfig
from ..models import BuildResult
from ..utils import collect_markdown_files
from .sitemap_generator import build_sitemap, write_sitemap
from .robots_generator import emit_robots

logger = logging.getLogger(__name__)


def generate_sitemap(
    site_config: SiteConfig,
    today: Optional[date] = None,
    result: Optional[BuildResult] = None,
) -> BuildResult:
    """
    Collect posts and write sitemap.xml.

    Never raises for build problems: per-file issues end up in
    result.warnings, anything fatal in result.error.
    """
    if result is None:
        result = BuildResult()

    try:
        logger.info("🔄 Generating sitemap.xml...")
        logger.info(f"Using site URL: {site_config.site_url}")

        files = collect_markdown_files(site_config.content_dir)
        logger.info(f"Found {len(files)} markdown files in {site_config.content_dir}")

        xml, url_count = build_sitemap(files, site_config, today=today, result=result)
        result.sitemap_path = write_sitemap(xml, site_config.output_dir)

        logger.info(f"✅ Sitemap generated with {url_count} URLs at: {result.sitemap_path}")
    except Exception as e:
        result.error = f"Error generating sitemap: {e}"
        logger.exception(f"❌ {result.error}")

    return result


def generate_robots(site_config: SiteConfig, result: Optional[BuildResult] = None) -> BuildResult:
    """Write robots.txt, recording any failure on the result."""
    if result is None:
        result = BuildResult()

    try:
        result.robots_path = emit_robots(site_config.site_url, site_config.output_dir)
    except Exception as e:
        result.error = f"Error generating robots.txt: {e}"
        logger.exception(f"❌ {result.error}")

    return result


def generate_site_files(site_config: SiteConfig, today: Optional[date] = None) -> BuildResult:
    """
    Run the full build: sitemap.xml, then robots.txt.

    robots.txt is only written once the sitemap it points to exists.
    """
    result = generate_sitemap(site_config, today=today)

    if not result.ok:
        logger.warning("⚠️ Skipping robots.txt because the sitemap was not generated")
        return result

    generate_robots(site_config, result)

    if result.warnings:
        logger.warning(f"⚠️ Build finished with {len(result.warnings)} warning(s), {len(result.skipped)} file(s) skipped")

    return result

"""
Generate robots.txt for SEO.
"""

import logging
from pathlib import Path

from ..config import CRAWL_DELAY, ROBOTS_FILENAME, SITEMAP_FILENAME

logger = logging.getLogger(__name__)


def render_robots(site_url: str) -> str:
    """Return robots.txt content pointing crawlers at the sitemap."""
    return f"""# robots.txt for {site_url}
User-agent: *
Allow: /

# Sitemap location
Sitemap: {site_url}/{SITEMAP_FILENAME}

# Block specific directories or files if needed
# Disallow: /private/
# Disallow: /admin/

# Crawl delay for bots (optional)
Crawl-delay: {CRAWL_DELAY}
"""


def emit_robots(site_url: str, output_dir: Path) -> Path:
    """Write robots.txt with sitemap reference, overwriting any existing file."""
    logger.info("🔄 Generating robots.txt...")

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    output_path = output_dir / ROBOTS_FILENAME
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(render_robots(site_url))

    logger.info(f"✅ robots.txt generated at: {output_path}")
    return output_path

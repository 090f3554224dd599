"""
Configuration for the tvcalc site build tooling.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

logger = logging.getLogger(__name__)

# Project root directory (parent of tvcalc package)
PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Build inputs/outputs (relative to project root)
CONTENT_DIR = str(PROJECT_ROOT / "blog-content")
OUTPUT_DIR = str(PROJECT_ROOT / "public")
SITE_CONFIG_FILE = str(PROJECT_ROOT / "site.json")

SITEMAP_FILENAME = "sitemap.xml"
ROBOTS_FILENAME = "robots.txt"
MARKDOWN_EXTENSION = ".md"

# Fallback origin when neither site.json nor the environment provide one
DEFAULT_SITE_URL = "https://youtube-tv-calculator.netlify.app"

# Environment variables checked for the site origin, in order
SITE_URL_ENV_VARS = ("SITE_URL", "VITE_SITE_URL")

# Seed routes: (path, priority)
STATIC_ROUTES = [
    ("/", 1.0),
    ("/blog", 0.8),
    ("/sitemap", 0.5),
]
POST_PRIORITY = 0.7
UNTITLED_POST = "Untitled Post"

# robots.txt
CRAWL_DELAY = 10

# Site branding
SITE_NAME = "YouTube TV Calculator"

# Calculator pricing (USD per month)
BASE_PLAN_NAME = "YouTube TV Base Plan"
BASE_PLAN_PRICE = 72.99
TAX_LABEL = "California (7.25%)"
TAX_RATE = 0.0725
BILLING_CYCLES = {"monthly": 1, "yearly": 12}

ADDON_PACKAGES = [
    {
        "id": "4k-plus",
        "name": "4K Plus",
        "price": 9.99,
        "description": "Watch select content in 4K resolution, plus unlimited streams at home.",
    },
    {
        "id": "spanish-plus",
        "name": "Spanish Plus",
        "price": 14.99,
        "description": "Get Spanish language channels and content.",
    },
    {
        "id": "sports-plus",
        "name": "Sports Plus",
        "price": 10.99,
        "description": "Additional sports channels like NFL RedZone, Fox College Sports, and more.",
    },
    {
        "id": "entertainment-plus",
        "name": "Entertainment Plus",
        "price": 29.99,
        "description": "Bundle of HBO Max, Showtime, and Starz.",
    },
]


@dataclass(frozen=True)
class SiteConfig:
    """Build-wide settings, resolved once and passed to every step."""

    site_url: str
    content_dir: Path
    output_dir: Path


def _site_url_from_file(config_path: Path) -> Optional[str]:
    """Read siteUrl from a site.json file, or None if unusable."""
    if not config_path.exists():
        return None

    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.debug(f"Ignoring unreadable site config {config_path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.debug(f"Ignoring site config {config_path}: not a JSON object")
        return None

    site_url = data.get("siteUrl") or data.get("site_url")
    if not isinstance(site_url, str) or not site_url.strip():
        return None
    return site_url


def resolve_site_url(
    config_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Resolve the site's absolute origin.

    Order: site config file, then the SITE_URL / VITE_SITE_URL environment
    variables, then DEFAULT_SITE_URL. Never raises.
    """
    if env is None:
        env = os.environ
    if config_path is None:
        config_path = Path(SITE_CONFIG_FILE)

    site_url = _site_url_from_file(Path(config_path))

    if not site_url:
        for name in SITE_URL_ENV_VARS:
            if env.get(name, "").strip():
                site_url = env[name]
                break

    if not site_url:
        site_url = DEFAULT_SITE_URL

    return site_url.strip().rstrip("/")


def resolve_site_config(
    config_path: Optional[Path] = None,
    env: Optional[Mapping[str, str]] = None,
    site_url: Optional[str] = None,
    content_dir: Optional[str] = None,
    output_dir: Optional[str] = None,
) -> SiteConfig:
    """
    Build the SiteConfig for this process.

    Explicit arguments (from the CLI) win over the environment, which wins
    over the module defaults.
    """
    if env is None:
        env = os.environ

    if site_url:
        site_url = site_url.strip().rstrip("/")
    else:
        site_url = resolve_site_url(config_path, env)

    return SiteConfig(
        site_url=site_url,
        content_dir=Path(content_dir or env.get("CONTENT_DIR") or CONTENT_DIR),
        output_dir=Path(output_dir or env.get("OUTPUT_DIR") or OUTPUT_DIR),
    )

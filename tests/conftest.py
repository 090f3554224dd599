"""Shared fixtures for the site build tests."""

from pathlib import Path

import pytest

from tvcalc.config import SiteConfig

SITE_URL = "https://example.com"


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    path = tmp_path / "blog-content"
    path.mkdir()
    return path


@pytest.fixture
def site_config(tmp_path: Path, content_dir: Path) -> SiteConfig:
    return SiteConfig(site_url=SITE_URL, content_dir=content_dir, output_dir=tmp_path / "public")


@pytest.fixture
def write_post(content_dir: Path):
    """Write a markdown file under the content directory and return its path."""

    def _write(name: str, text: str) -> Path:
        path = content_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write

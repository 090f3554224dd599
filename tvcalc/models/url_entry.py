"""
Sitemap URL entry model.
"""

from dataclasses import dataclass
from typing import Optional

CHANGEFREQ_VALUES = ("always", "hourly", "daily", "weekly", "monthly", "yearly", "never")


@dataclass
class UrlEntry:
    """A single <url> element of a sitemap."""

    url: str  # Site-relative path, always with a leading slash
    lastmod: Optional[str] = None  # "YYYY-MM-DD"
    changefreq: Optional[str] = None
    priority: Optional[float] = None  # None means "not set"; 0.0 is a valid value

    def __post_init__(self):
        if not self.url.startswith("/"):
            raise ValueError(f"URL path must start with '/': {self.url!r}")
        if self.changefreq is not None and self.changefreq not in CHANGEFREQ_VALUES:
            raise ValueError(f"Invalid changefreq: {self.changefreq!r}")
        if self.priority is not None and not 0.0 <= self.priority <= 1.0:
            raise ValueError(f"Priority must be within [0.0, 1.0]: {self.priority!r}")

    def loc(self, site_url: str) -> str:
        """Return the absolute URL for this entry."""
        return f"{site_url}{self.url}"

    @property
    def priority_display(self) -> str:
        """Return priority formatted for the sitemap (e.g., '0.7')."""
        if self.priority is None:
            return ""
        return f"{self.priority:.1f}"

"""
Markdown post models.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional


@dataclass
class MarkdownDocument:
    """A markdown file split into its front matter and body."""

    front_matter: Dict[str, str] = field(default_factory=dict)
    body: str = ""

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return a front matter value, treating empty strings as missing."""
        value = self.front_matter.get(key)
        return value if value else default


@dataclass
class PostMeta:
    """What the sitemap needs to know about one blog post."""

    title: str
    slug: str
    source: Path
    date: Optional[str] = None  # Front matter date, normalized when parseable

    @property
    def url(self) -> str:
        """Posts live at the site root, not under /blog/."""
        return f"/{self.slug}"

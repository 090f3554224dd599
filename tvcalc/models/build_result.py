"""
Result of one sitemap/robots build.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .url_entry import UrlEntry


@dataclass
class BuildResult:
    """Collects what a build produced and everything that went wrong along the way."""

    entries: List[UrlEntry] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    sitemap_path: Optional[Path] = None
    robots_path: Optional[Path] = None
    error: Optional[str] = None

    @property
    def url_count(self) -> int:
        return len(self.entries)

    @property
    def ok(self) -> bool:
        """True when no top-level step failed."""
        return self.error is None

    @property
    def clean(self) -> bool:
        """True when the build succeeded without skipping anything."""
        return self.ok and not self.warnings

    def warn(self, message: str, path: Optional[Path] = None) -> None:
        self.warnings.append(message)
        if path is not None:
            self.skipped.append(path)

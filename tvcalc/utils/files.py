"""
Content directory helpers.
"""

import logging
from pathlib import Path
from typing import List, Union

from ..config import MARKDOWN_EXTENSION

logger = logging.getLogger(__name__)


def collect_markdown_files(root_dir: Union[str, Path]) -> List[Path]:
    """
    Recursively find all markdown files under root_dir.

    Directory entries are visited in sorted order, depth-first, so the result
    is stable between builds. A missing content directory yields an empty
    list (blog-less deployments are fine).
    """
    root = Path(root_dir)
    if not root.is_dir():
        logger.info(f"Content directory {root} not found, no posts to collect")
        return []

    found: List[Path] = []
    _walk(root, found)
    return found


def _walk(directory: Path, found: List[Path]) -> None:
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir():
            _walk(entry, found)
        elif entry.name.endswith(MARKDOWN_EXTENSION):
            found.append(entry)

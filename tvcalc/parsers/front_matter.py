"""
Front matter parser for blog markdown files.

Front matter is a block of "key: value" lines between two "---" lines at the
very top of the file. Values are kept as plain strings; this is not YAML.
"""

import re
from typing import Dict

from ..models import MarkdownDocument

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)(.*)\Z",
    re.DOTALL | re.MULTILINE,
)

TITLE_HEADING_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)


def parse_front_matter(raw: str) -> MarkdownDocument:
    """
    Split a markdown document into front matter and body.

    Documents without a front matter block come back with an empty mapping
    and the whole input as body.
    """
    match = FRONT_MATTER_PATTERN.match(raw)
    if not match:
        return MarkdownDocument(front_matter={}, body=raw)

    header, body = match.group(1), match.group(2)
    return MarkdownDocument(front_matter=_parse_header(header), body=body)


def _parse_header(header: str) -> Dict[str, str]:
    """Parse "key: value" lines; the value keeps any further colons."""
    front_matter: Dict[str, str] = {}

    for line in header.splitlines():
        if ":" not in line:
            continue
        key, value = line.split(":", 1)
        key = key.strip()
        if not key:
            continue
        front_matter[key] = value.strip()

    return front_matter


def extract_title(body: str) -> str:
    """Return the text of the first level-1 heading, or "" if there is none."""
    match = TITLE_HEADING_PATTERN.search(body)
    return match.group(1).strip() if match else ""

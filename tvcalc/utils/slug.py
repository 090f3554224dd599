"""
Slug generation shared by the sitemap build and the live site's routing.

Both sides must derive the same slug for the same title, or post links break.
"""

import re

# JavaScript's \s, so slugs match the live site's; \w stays ASCII there too
_WHITESPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_DISALLOWED = re.compile(rf"[^\w{_WHITESPACE}-]", re.ASCII)
_SEPARATORS = re.compile(rf"[{_WHITESPACE}_-]+", re.ASCII)


def derive_slug(text: str) -> str:
    """
    Convert free text into a URL-safe slug.

    "Hello, World!" -> "hello-world"
    "  YouTube TV: 4K_Plus -- Review " -> "youtube-tv-4k-plus-review"

    Only ASCII letters and digits survive; the result is empty if none do.
    """
    slug = text.lower()
    slug = _DISALLOWED.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    return slug.strip("-")

from .front_matter import parse_front_matter, extract_title

__all__ = ["parse_front_matter", "extract_title"]

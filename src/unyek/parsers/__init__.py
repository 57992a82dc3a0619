"""Archive parsers."""

from unyek.parsers.marker_parser import MarkerParser, parse

__all__ = ["MarkerParser", "parse"]

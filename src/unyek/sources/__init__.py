"""Archive input sources for unyek."""

from typing import Optional

from unyek.protocols import ArchiveSource
from unyek.sources.file_source import FileSource
from unyek.sources.stdin_source import StdinSource

# Registry of available sources
_SOURCES: list[ArchiveSource] = [
    StdinSource(),
    FileSource(),
]


def get_source(source: str) -> Optional[ArchiveSource]:
    """Find a source that can read the given archive argument.

    Args:
        source: Archive path, or '-' for standard input

    Returns:
        An ArchiveSource instance that can read it, or None
    """
    for candidate in _SOURCES:
        if candidate.can_handle(source):
            return candidate
    return None


def register_source(source: ArchiveSource) -> None:
    """Register a custom source (for plugins/extensions).

    Args:
        source: An object implementing the ArchiveSource protocol
    """
    _SOURCES.append(source)


__all__ = ["get_source", "register_source", "FileSource", "StdinSource"]

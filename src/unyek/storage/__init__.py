"""In-memory view of a reconstructed archive."""

from unyek.storage.index import ArchiveIndex

__all__ = ["ArchiveIndex"]

"""Output writers for reconstructed files."""

from unyek.writers.filesystem import FileSystemWriter

__all__ = ["FileSystemWriter"]

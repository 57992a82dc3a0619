"""Data models for unyek."""

from unyek.models.archive import (
    DEFAULT_FORMAT,
    ArchiveFormat,
    FileGroup,
    FilePart,
    RawEntry,
    ReconstructedFile,
)

__all__ = [
    "ArchiveFormat",
    "DEFAULT_FORMAT",
    "RawEntry",
    "FilePart",
    "FileGroup",
    "ReconstructedFile",
]

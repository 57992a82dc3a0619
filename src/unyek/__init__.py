"""unyek - restore the files packed into a yek archive."""

from unyek.models import DEFAULT_FORMAT, ArchiveFormat, RawEntry, ReconstructedFile
from unyek.parsers import MarkerParser, parse
from unyek.reconstruction import Reconstructor, split_chunk_path

__version__ = "0.1.0"

__all__ = [
    "ArchiveFormat",
    "DEFAULT_FORMAT",
    "MarkerParser",
    "RawEntry",
    "ReconstructedFile",
    "Reconstructor",
    "parse",
    "split_chunk_path",
]

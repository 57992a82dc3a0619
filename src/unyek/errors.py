"""Exceptions raised by unyek."""


class UnyekError(Exception):
    """Base class for unyek errors."""


class ArchiveReadError(UnyekError):
    """The archive could not be read."""


class UnsafePathError(UnyekError):
    """A reconstructed path points outside the output root."""

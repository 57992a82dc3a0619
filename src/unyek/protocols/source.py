"""Protocol for archive input handlers."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ArchiveSource(Protocol):
    """Protocol for archive input handlers.

    Implementations read the archive text from different places (a file,
    standard input). Uses structural subtyping - no inheritance required.
    """

    @property
    def source_type(self) -> str:
        """Return identifier for this source type (e.g., 'file', 'stdin')."""
        ...

    def can_handle(self, source: str) -> bool:
        """Check if this source can read the given argument."""
        ...

    def read(self, source: str) -> str:
        """Return the archive text.

        Raises ArchiveReadError when the archive cannot be read.
        """
        ...

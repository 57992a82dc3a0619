"""Protocol for chunk join policies."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class JoinPolicy(Protocol):
    """Protocol for joining the content of consecutive chunks.

    A policy sees the content accumulated so far, the raw content of the
    previous chunk and the content of the next chunk.
    """

    @property
    def name(self) -> str:
        """Return identifier for this policy (e.g., 'trim', 'concat')."""
        ...

    def join(self, result: str, previous: str, current: str) -> str:
        """Append current to result and return the joined text."""
        ...

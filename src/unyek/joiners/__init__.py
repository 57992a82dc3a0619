"""Join policies for reassembling chunked files."""

from typing import Optional

from unyek.joiners.boundary_trim import BoundaryTrimJoiner
from unyek.joiners.concat import ConcatJoiner
from unyek.protocols import JoinPolicy

# Registry of available join policies
_JOINERS: dict[str, JoinPolicy] = {
    BoundaryTrimJoiner.name: BoundaryTrimJoiner(),
    ConcatJoiner.name: ConcatJoiner(),
}

DEFAULT_JOINER = BoundaryTrimJoiner.name


def get_joiner(name: str) -> Optional[JoinPolicy]:
    """Find a join policy by name.

    Args:
        name: Policy identifier ('trim' or 'concat')

    Returns:
        The JoinPolicy registered under that name, or None
    """
    return _JOINERS.get(name)


def available_joiners() -> list[str]:
    """Names of the registered join policies."""
    return list(_JOINERS)


__all__ = [
    "BoundaryTrimJoiner",
    "ConcatJoiner",
    "DEFAULT_JOINER",
    "available_joiners",
    "get_joiner",
]

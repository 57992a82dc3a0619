"""Protocol definitions for extensible components."""

from unyek.protocols.joiner import JoinPolicy
from unyek.protocols.source import ArchiveSource

__all__ = ["ArchiveSource", "JoinPolicy"]

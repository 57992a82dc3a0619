"""Core data models for archive entries and reconstructed files."""

import re
from dataclasses import dataclass, field
from functools import cached_property


@dataclass(frozen=True)
class ArchiveFormat:
    """Marker literal and chunk-suffix pattern of an archive.

    The part pattern must have two groups: the base path and the
    decimal chunk number.
    """

    marker: str = ">>>>"
    part_pattern: str = r"^(.+):part([0-9]+)$"

    @cached_property
    def marker_regex(self) -> re.Pattern[str]:
        # Horizontal whitespace only, so a marker never swallows the next line
        return re.compile(rf"^{re.escape(self.marker)}[ \t]+(.*)$", re.MULTILINE)

    @cached_property
    def part_regex(self) -> re.Pattern[str]:
        return re.compile(self.part_pattern)


DEFAULT_FORMAT = ArchiveFormat()


@dataclass(frozen=True)
class RawEntry:
    """One marker's path and the content that follows it."""

    path: str
    content: str
    offset: int = 0  # position of the marker line in the archive


@dataclass(frozen=True)
class FilePart:
    """A chunk of a logical file."""

    path: str
    number: int
    content: str


@dataclass
class FileGroup:
    """A base path and all chunks collected for it."""

    base_path: str
    parts: list[FilePart] = field(default_factory=list)
    chunked: bool = False

    @property
    def part_count(self) -> int:
        return len(self.parts)

    def sorted_parts(self) -> list[FilePart]:
        """Return parts ascending by chunk number."""
        return sorted(self.parts, key=lambda part: part.number)


@dataclass(frozen=True)
class ReconstructedFile:
    """Final content for one base path."""

    path: str
    content: str
    part_count: int = 1

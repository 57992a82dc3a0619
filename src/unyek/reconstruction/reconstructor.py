"""Reassemble logical files from parsed archive entries."""

import logging
from typing import Iterable, Iterator, Optional

from unyek.joiners import BoundaryTrimJoiner
from unyek.models import (
    DEFAULT_FORMAT,
    ArchiveFormat,
    FileGroup,
    FilePart,
    RawEntry,
    ReconstructedFile,
)
from unyek.protocols import JoinPolicy

logger = logging.getLogger(__name__)


def split_chunk_path(
    path: str, fmt: ArchiveFormat = DEFAULT_FORMAT
) -> tuple[str, int, bool]:
    """Split a path-as-written into base path and chunk number.

    Args:
        path: Path from a marker line, possibly with a :partN suffix
        fmt: Archive format providing the part pattern

    Returns:
        (base_path, chunk_number, is_chunked); paths without a suffix are
        their own base path with chunk number 0
    """
    match = fmt.part_regex.match(path)
    if not match:
        return path, 0, False
    return match.group(1), int(match.group(2)), True


class Reconstructor:
    """Group entries by base path and join their chunks in order."""

    def __init__(
        self,
        fmt: ArchiveFormat = DEFAULT_FORMAT,
        joiner: Optional[JoinPolicy] = None,
    ):
        self.fmt = fmt
        self.joiner = joiner or BoundaryTrimJoiner()

    def group(self, entries: Iterable[RawEntry]) -> dict[str, FileGroup]:
        """Collect entries into file groups.

        Groups keep the order in which their base path first appears. A
        chunk number seen twice for the same base path keeps the later
        entry.

        Args:
            entries: Parsed archive entries in archive order

        Returns:
            Insertion-ordered mapping of base path to FileGroup
        """
        groups: dict[str, FileGroup] = {}

        for entry in entries:
            base_path, number, chunked = split_chunk_path(entry.path, self.fmt)

            group = groups.get(base_path)
            if group is None:
                group = FileGroup(base_path=base_path)
                groups[base_path] = group

            part = FilePart(path=entry.path, number=number, content=entry.content)
            group.chunked = group.chunked or chunked

            for idx, existing in enumerate(group.parts):
                if existing.number == number:
                    logger.warning(
                        f"Duplicate part {number} for {base_path}: "
                        f"{part.path!r} replaces {existing.path!r}"
                    )
                    group.parts[idx] = part
                    break
            else:
                group.parts.append(part)

        return groups

    def combine(self, parts: list[FilePart]) -> str:
        """Join parts in chunk-number order.

        Args:
            parts: The parts of one file group, in any order

        Returns:
            The reconstructed content
        """
        ordered = sorted(parts, key=lambda part: part.number)

        result = ""
        for idx, part in enumerate(ordered):
            if idx == 0:
                result = part.content
                continue
            result = self.joiner.join(result, ordered[idx - 1].content, part.content)

        return result

    def reconstruct(self, entries: Iterable[RawEntry]) -> Iterator[ReconstructedFile]:
        """Yield one reconstructed file per base path, in group order."""
        for base_path, group in self.group(entries).items():
            yield ReconstructedFile(
                path=base_path,
                content=self.combine(group.parts),
                part_count=group.part_count,
            )

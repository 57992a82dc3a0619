"""Read-only index over the files reconstructed from one archive."""

from pathlib import Path
from typing import Optional

from unyek.errors import ArchiveReadError
from unyek.models import DEFAULT_FORMAT, ArchiveFormat, FileGroup
from unyek.parsers import MarkerParser
from unyek.protocols import JoinPolicy
from unyek.reconstruction import Reconstructor
from unyek.sources import get_source


class ArchiveIndex:
    """Parsed and grouped archive, reconstructed on demand."""

    def __init__(
        self,
        text: str,
        fmt: ArchiveFormat = DEFAULT_FORMAT,
        joiner: Optional[JoinPolicy] = None,
    ):
        self.fmt = fmt
        self.reconstructor = Reconstructor(fmt, joiner)
        self.entry_count = 0
        self._groups: dict[str, FileGroup] = {}
        self._contents: dict[str, str] = {}
        self.load_text(text)

    @classmethod
    def from_source(
        cls,
        source: Path | str,
        fmt: ArchiveFormat = DEFAULT_FORMAT,
        joiner: Optional[JoinPolicy] = None,
    ) -> "ArchiveIndex":
        """Build an index from an archive path (or '-' for stdin)."""
        reader = get_source(str(source))
        if reader is None:
            raise ArchiveReadError(f"No source can read: {source}")
        return cls(reader.read(str(source)), fmt, joiner)

    def load_text(self, text: str) -> None:
        """Replace the indexed archive with new text."""
        entries = MarkerParser(self.fmt).parse(text)
        self.entry_count = len(entries)
        self._groups = self.reconstructor.group(entries)
        self._contents = {}

    def __len__(self) -> int:
        return len(self._groups)

    def paths(self) -> list[str]:
        """Base paths in archive order."""
        return list(self._groups)

    def list_files(self, path_prefix: str = "") -> list[dict]:
        """List reconstructed files matching prefix (for ls tool)."""
        files = []
        for base_path, group in self._groups.items():
            if not base_path.startswith(path_prefix):
                continue
            files.append(
                {
                    "path": base_path,
                    "size_chars": len(self._content(base_path)),
                    "part_count": group.part_count,
                    "chunked": group.chunked,
                }
            )
        return files

    def read_file(self, path: str) -> Optional[str]:
        """Reconstructed content of one base path (for read tool)."""
        if path not in self._groups:
            return None
        return self._content(path)

    def parts(self, path: str) -> Optional[list[str]]:
        """Chunk paths of one base path in join order (for parts tool)."""
        group = self._groups.get(path)
        if group is None:
            return None
        return [part.path for part in group.sorted_parts()]

    def _content(self, path: str) -> str:
        if path not in self._contents:
            group = self._groups[path]
            self._contents[path] = self.reconstructor.combine(group.parts)
        return self._contents[path]

"""Source for archive files on disk."""

from pathlib import Path

from unyek.errors import ArchiveReadError


class FileSource:
    """Read an archive from a local file."""

    source_type = "file"

    def can_handle(self, source: str) -> bool:
        """Any argument other than '-' names a file."""
        return bool(source) and source != "-"

    def read(self, source: str) -> str:
        """Read and decode the archive file.

        Args:
            source: Path to the archive file

        Returns:
            The archive text, decoded as UTF-8 with replacement characters
        """
        path = Path(source)
        try:
            raw_content = path.read_bytes()
        except OSError as e:
            raise ArchiveReadError(f"Cannot read {source}: {e.strerror or e}") from e

        return raw_content.decode("utf-8", errors="replace")

"""Source for archives piped through standard input."""

import sys

from unyek.errors import ArchiveReadError


class StdinSource:
    """Read an archive from standard input when the argument is '-'."""

    source_type = "stdin"

    def can_handle(self, source: str) -> bool:
        return source == "-"

    def read(self, source: str) -> str:
        try:
            raw_content = sys.stdin.buffer.read()
        except OSError as e:
            raise ArchiveReadError(f"Cannot read standard input: {e}") from e

        return raw_content.decode("utf-8", errors="replace")

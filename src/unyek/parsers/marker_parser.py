"""Marker-line parsing of yek archives."""

import logging

from unyek.models import DEFAULT_FORMAT, ArchiveFormat, RawEntry

logger = logging.getLogger(__name__)


class MarkerParser:
    """Split an archive into entries at marker lines.

    A marker line starts with the format's marker literal, followed by
    spaces or tabs and the path. Everything up to the next marker line
    (or the end of the archive) is that path's content:
    - Text before the first marker is discarded
    - Markers with an empty path produce no entry but still end the
      previous entry's content
    - There is no escaping, so content lines that look like markers are
      markers
    """

    def __init__(self, fmt: ArchiveFormat = DEFAULT_FORMAT):
        self.fmt = fmt

    def parse(self, text: str) -> list[RawEntry]:
        """Parse archive text into entries in order of appearance.

        Args:
            text: The full archive text

        Returns:
            List of RawEntry objects, empty when no marker is found
        """
        if not text:
            return []

        markers = list(self.fmt.marker_regex.finditer(text))
        entries = []

        for idx, match in enumerate(markers):
            path = match.group(1).strip()

            # Content starts after the marker line's newline
            content_start = min(match.end() + 1, len(text))
            if idx + 1 < len(markers):
                content_end = markers[idx + 1].start()
            else:
                content_end = len(text)

            if not path:
                logger.debug(f"Skipping empty marker at offset {match.start()}")
                continue

            entries.append(
                RawEntry(
                    path=path,
                    content=text[content_start:content_end],
                    offset=match.start(),
                )
            )

        return entries


def parse(text: str, fmt: ArchiveFormat = DEFAULT_FORMAT) -> list[RawEntry]:
    """Parse archive text with a one-off MarkerParser."""
    return MarkerParser(fmt).parse(text)

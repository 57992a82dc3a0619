"""Conditional whitespace trimming at chunk boundaries."""

import logging
import re

logger = logging.getLogger(__name__)

_WORD_END = re.compile(r"\w$")
_WORD_START = re.compile(r"^\w")
_QUOTE_END = re.compile(r"[\"']$")
_QUOTE_START = re.compile(r"^[\"']")
_OPEN_STRING_END = re.compile(r"[\"'][^\"']*$")
_OPEN_STRING_START = re.compile(r"^[^\"']*[\"']")


def should_trim(end: str, start: str) -> bool:
    """Check whether a chunk boundary looks like a mid-token split.

    Args:
        end: Tail of the previous chunk, trailing whitespace removed
        start: Head of the next chunk, leading whitespace removed

    Returns:
        True if the whitespace between the chunks should be dropped
    """
    # Split word or identifier
    if _WORD_END.search(end) and _WORD_START.search(start):
        return True

    # Split between adjacent string literals
    if _QUOTE_END.search(end) and _QUOTE_START.search(start):
        return True

    # Split inside a string literal
    if _OPEN_STRING_END.search(end) and _OPEN_STRING_START.search(start):
        return True

    return False


class BoundaryTrimJoiner:
    """Default join: drop boundary whitespace only where a split is evident.

    The archiver may cut a file anywhere, including through an identifier
    or a string literal. Whitespace at a boundary is removed when the
    characters around it show such a cut; otherwise the chunks are
    concatenated untouched so meaningful whitespace survives.
    """

    name = "trim"
    WINDOW = 10

    def join(self, result: str, previous: str, current: str) -> str:
        """Append current to result, trimming the boundary when needed.

        Args:
            result: Content joined so far
            previous: Raw content of the chunk before current
            current: Raw content of the chunk being appended

        Returns:
            The joined content
        """
        end = previous.rstrip()[-self.WINDOW :]
        start = current.lstrip()[: self.WINDOW]

        if should_trim(end, start):
            logger.debug(f"Trimming boundary {end!r} | {start!r}")
            return result.rstrip() + current.lstrip()

        return result + current

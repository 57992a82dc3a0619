"""Verbatim join policy."""


class ConcatJoiner:
    """Concatenate chunks exactly as they are."""

    name = "concat"

    def join(self, result: str, previous: str, current: str) -> str:
        return result + current

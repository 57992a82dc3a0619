"""Write reconstructed files onto a directory tree."""

from pathlib import Path

from unyek.errors import UnsafePathError


class FileSystemWriter:
    """Write files under an output root, overwriting existing ones."""

    def __init__(self, root: Path | str = "."):
        self.root = Path(root)

    def resolve(self, path: str) -> Path:
        """Map an archive path to its destination under the root.

        Raises:
            UnsafePathError: If the path is absolute, invalid or leaves the root
        """
        if Path(path).is_absolute():
            raise UnsafePathError(f"Absolute path not allowed: {path}")

        if "\x00" in path:
            raise UnsafePathError(f"Invalid path: {path!r}")

        root = self.root.resolve()
        try:
            dest = (root / path).resolve()
        except ValueError as e:
            raise UnsafePathError(f"Invalid path: {path!r}") from e
        if dest == root or not dest.is_relative_to(root):
            raise UnsafePathError(f"Path escapes output directory: {path}")
        return dest

    def write(self, path: str, content: str) -> Path:
        """Create parent directories and write content.

        Args:
            path: Relative path of the file
            content: Text to write (newlines are kept as they are)

        Returns:
            The destination path
        """
        dest = self.resolve(path)
        dest.parent.mkdir(parents=True, exist_ok=True)
        with open(dest, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        return dest

"""FastMCP server implementation for unyek."""

from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from unyek.models import DEFAULT_FORMAT, ArchiveFormat
from unyek.protocols import JoinPolicy
from unyek.storage import ArchiveIndex


def format_size(size: int) -> str:
    """Human-readable size for a character count."""
    if size < 1024:
        return f"{size} B"
    elif size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def create_mcp_server(
    archive_path: Path,
    fmt: ArchiveFormat = DEFAULT_FORMAT,
    joiner: Optional[JoinPolicy] = None,
) -> FastMCP:
    """Create an MCP server for a specific archive.

    The archive is parsed once at startup; files are reconstructed lazily
    as they are read. Nothing is written to disk.

    Args:
        archive_path: Path to the archive to serve
        fmt: Marker format of the archive
        joiner: Join policy for chunked files

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="unyek",
    )

    index = ArchiveIndex.from_source(archive_path, fmt, joiner)

    @mcp.tool()
    def ls(path: str = "") -> str:
        """List files contained in the archive.

        Args:
            path: Optional path prefix to filter results (e.g., "src/" to list only files in src/)

        Returns:
            Formatted list of files with size and part count
        """
        files = index.list_files(path)

        if not files:
            return f"No files found matching '{path}'"

        lines = []
        for f in files:
            parts = f"[{f['part_count']} parts]" if f["chunked"] else ""
            lines.append(f"{f['path']:<60} {format_size(f['size_chars']):>10} {parts}")

        return "\n".join(lines)

    @mcp.tool()
    def read(path: str) -> str:
        """Read a file's reconstructed content from the archive.

        Args:
            path: Base path of the file (as shown in ls output, without :partN)

        Returns:
            File content with all parts joined
        """
        content = index.read_file(path)

        if content is None:
            return f"Error: File not found: {path}"

        return content

    @mcp.tool()
    def parts(path: str) -> str:
        """Show which archive entries a file was reassembled from.

        Args:
            path: Base path of the file

        Returns:
            The entry paths in the order they were joined
        """
        names = index.parts(path)

        if names is None:
            return f"Error: File not found: {path}"

        return "\n".join(names)

    return mcp

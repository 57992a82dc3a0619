"""CLI entry point for unyek."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from unyek.errors import ArchiveReadError, UnsafePathError
from unyek.joiners import DEFAULT_JOINER, available_joiners, get_joiner
from unyek.models import DEFAULT_FORMAT, ArchiveFormat
from unyek.parsers import MarkerParser
from unyek.protocols import JoinPolicy
from unyek.reconstruction import Reconstructor
from unyek.sources import get_source
from unyek.writers import FileSystemWriter

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def describe(path: str, part_count: int) -> str:
    """Progress label for a reconstructed file."""
    if part_count > 1:
        return f"{path} (from {part_count} parts)"
    return path


def read_archive(archive: str) -> str:
    """Read archive text from a file path or '-' for stdin."""
    source = get_source(archive)
    if source is None:
        raise ArchiveReadError(f"Cannot read archive: {archive!r}")
    return source.read(archive)


def extract(
    archive: str,
    output: str = ".",
    fmt: ArchiveFormat = DEFAULT_FORMAT,
    joiner: Optional[JoinPolicy] = None,
    dry_run: bool = False,
) -> int:
    """Reconstruct every file in an archive and write it under output.

    Args:
        archive: Path to the archive, or '-' for stdin
        output: Directory the files are written into
        fmt: Marker format of the archive
        joiner: Join policy for chunked files
        dry_run: Log what would be written without writing

    Returns:
        Number of files that failed to write
    """
    try:
        text = read_archive(archive)
    except ArchiveReadError as e:
        logger.error(f"Error processing archive: {e}")
        sys.exit(1)

    entries = MarkerParser(fmt).parse(text)
    if not entries:
        logger.warning(f"No '{fmt.marker}' markers found in {archive}")
        return 0

    reconstructor = Reconstructor(fmt, joiner)
    writer = FileSystemWriter(output)

    written = 0
    failed = 0

    for rebuilt in reconstructor.reconstruct(entries):
        label = describe(rebuilt.path, rebuilt.part_count)

        if dry_run:
            logger.info(f"Would write: {label}")
            written += 1
            continue

        try:
            writer.write(rebuilt.path, rebuilt.content)
        except (OSError, UnsafePathError) as e:
            logger.error(f"Failed to write {rebuilt.path}: {e}")
            failed += 1
            continue

        logger.info(f"Written: {label}")
        written += 1

    logger.info(f"")
    verb = "Would write" if dry_run else "Written"
    logger.info(f"{verb} {written} files, {failed} failed -> {Path(output)}")
    return failed


def serve(
    archive: str,
    transport: str = "stdio",
    fmt: ArchiveFormat = DEFAULT_FORMAT,
    joiner: Optional[JoinPolicy] = None,
) -> None:
    """Start MCP server for an archive.

    Args:
        archive: Path to the archive file
        transport: Transport protocol (stdio or sse)
    """
    archive_path = Path(archive)
    if not archive_path.is_file():
        logger.error(f"Archive not found: {archive}")
        sys.exit(1)

    # Import here to avoid loading MCP unless needed
    from unyek.server import create_mcp_server

    from typing import cast, Literal

    logger.info(f"Serving {archive} via {transport}")
    try:
        mcp = create_mcp_server(archive_path, fmt, joiner)
    except ArchiveReadError as e:
        logger.error(f"Error processing archive: {e}")
        sys.exit(1)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def deck(
    archive: Optional[str] = None,
    fmt: ArchiveFormat = DEFAULT_FORMAT,
    joiner: Optional[JoinPolicy] = None,
) -> None:
    """Launch the Deck TUI to preview an archive's reconstruction."""
    from unyek.deck import main as deck_main

    deck_main(archive, fmt, joiner)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="unyek",
        description="unyek - Restore the files packed into a yek archive",
    )
    parser.add_argument(
        "archive",
        nargs="?",
        help="Archive file to unpack ('-' reads standard input)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=".",
        help="Directory to write files into (default: current directory)",
    )
    parser.add_argument(
        "--join",
        choices=available_joiners(),
        default=DEFAULT_JOINER,
        help="How chunks are joined (default: trim)",
    )
    parser.add_argument(
        "--marker",
        default=DEFAULT_FORMAT.marker,
        help="Marker prefix of file lines (default: >>>>)",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Show what would be written without writing",
    )

    modes = parser.add_mutually_exclusive_group()
    modes.add_argument(
        "--serve",
        action="store_true",
        help="Serve the archive over MCP instead of unpacking it",
    )
    modes.add_argument(
        "--deck",
        action="store_true",
        help="Preview the archive in the Deck TUI",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol for --serve (default: stdio)",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log boundary trim decisions and skipped markers",
    )
    verbosity.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    elif args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    if not args.marker.strip():
        parser.error("--marker must not be blank")
    if args.archive is None and not args.deck:
        parser.error("the following arguments are required: archive")
    if (args.serve or args.deck) and args.archive == "-":
        parser.error("--serve and --deck need an archive file, not standard input")

    fmt = ArchiveFormat(marker=args.marker.strip())
    joiner = get_joiner(args.join)

    if args.serve:
        serve(args.archive, args.transport, fmt, joiner)
    elif args.deck:
        deck(args.archive, fmt, joiner)
    else:
        failed = extract(args.archive, args.output, fmt, joiner, args.dry_run)
        sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()

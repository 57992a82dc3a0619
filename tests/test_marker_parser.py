"""Tests for marker-line parsing."""

from unyek.models import ArchiveFormat
from unyek.parsers import MarkerParser, parse


def serialize(files: dict[str, str], marker: str = ">>>>") -> str:
    return "".join(f"{marker} {path}\n{content}" for path, content in files.items())


def test_scenario_entries_in_order(scenario_text):
    entries = parse(scenario_text)

    assert [e.path for e in entries] == ["a.txt", "b.txt:part0", "b.txt:part1"]
    assert [e.content for e in entries] == ["hello\n", "foo\n", "bar\n"]


def test_round_trip_without_chunking():
    files = {
        "README.md": "# Title\n\nSome text.\n",
        "src/pkg/module.py": "import os\n\n\ndef main():\n    pass\n",
        "empty.txt": "",
        "no_newline.txt": "last line",
    }

    entries = parse(serialize(files))

    assert {e.path: e.content for e in entries} == files


def test_no_markers_yields_nothing():
    assert parse("") == []
    assert parse("just some text\nwith lines\n") == []
    assert parse(">>>>no-space-after-marker\n") == []


def test_preamble_is_discarded():
    entries = parse("header line\n\n>>>> a.txt\nbody\n")

    assert len(entries) == 1
    assert entries[0].content == "body\n"


def test_marker_only_recognized_at_line_start():
    entries = parse(">>>> a.txt\nx = '>>>> not a marker'\n  >>>> indented\n")

    assert len(entries) == 1
    assert entries[0].content == "x = '>>>> not a marker'\n  >>>> indented\n"


def test_content_line_with_marker_prefix_splits_entry():
    # No escaping exists: a content line shaped like a marker is a marker
    entries = parse(">>>> a.txt\nline\n>>>> looks/like/a/path\nrest\n")

    assert [e.path for e in entries] == ["a.txt", "looks/like/a/path"]


def test_empty_path_marker_is_dropped_but_ends_previous_content():
    entries = parse(">>>> a.txt\nkept\n>>>>   \nlost\n>>>> b.txt\nb\n")

    assert [e.path for e in entries] == ["a.txt", "b.txt"]
    assert entries[0].content == "kept\n"


def test_path_is_trimmed():
    entries = parse(">>>>\t  spaced/path.txt  \ncontent\n")

    assert entries[0].path == "spaced/path.txt"


def test_crlf_archive():
    entries = parse(">>>> a.txt\r\nline\r\n>>>> b.txt\r\n")

    assert [e.path for e in entries] == ["a.txt", "b.txt"]
    assert entries[0].content == "line\r\n"


def test_last_marker_without_newline_has_empty_content():
    entries = parse(">>>> a.txt\nx\n>>>> b.txt")

    assert entries[-1].path == "b.txt"
    assert entries[-1].content == ""


def test_offsets_point_at_marker_lines(scenario_text):
    entries = parse(scenario_text)

    for entry in entries:
        assert scenario_text[entry.offset :].startswith(">>>> ")


def test_custom_marker_format():
    fmt = ArchiveFormat(marker="-- FILE:")
    text = "-- FILE: a.py\nprint(1)\n>>>> b.py\nstill a.py\n"

    entries = MarkerParser(fmt).parse(text)

    assert len(entries) == 1
    assert entries[0].path == "a.py"
    assert entries[0].content == "print(1)\n>>>> b.py\nstill a.py\n"


def test_marker_with_regex_characters_is_literal():
    fmt = ArchiveFormat(marker="+++")
    entries = MarkerParser(fmt).parse("+++ a\n1\n++ b\n+++ c\n2\n")

    assert [e.path for e in entries] == ["a", "c"]

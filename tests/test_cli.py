"""Tests for the command-line interface."""

import io
import logging
import sys

import pytest

from unyek.cli import describe, extract, main

APP_PY = "def greet():\n    greeting = 'hi'\n\n    return greeting\n"


def run(argv, caplog) -> int:
    with caplog.at_level(logging.INFO):
        with pytest.raises(SystemExit) as exc:
            main(argv)
    return exc.value.code


def test_describe():
    assert describe("a.txt", 1) == "a.txt"
    assert describe("b.txt", 3) == "b.txt (from 3 parts)"


def test_unpacks_archive(archive_file, tmp_path, caplog):
    out = tmp_path / "out"

    code = run([str(archive_file), "-o", str(out)], caplog)

    assert code == 0
    assert (out / "README.md").read_text(encoding="utf-8") == "# Demo\n"
    assert (out / "src" / "app.py").read_text(encoding="utf-8") == APP_PY
    assert (out / "src" / "util" / "__init__.py").read_text(encoding="utf-8") == ""
    assert "Written: README.md" in caplog.messages
    assert "Written: src/app.py (from 2 parts)" in caplog.messages
    assert "Written 3 files, 0 failed" in caplog.text


def test_writes_relative_to_cwd_by_default(tmp_path, monkeypatch, caplog, scenario_text):
    archive = tmp_path / "scenario.txt"
    archive.write_text(scenario_text, encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert run(["scenario.txt"], caplog) == 0
    assert (tmp_path / "a.txt").read_text(encoding="utf-8") == "hello\n"
    assert (tmp_path / "b.txt").read_text(encoding="utf-8") == "foobar\n"


def test_concat_join_option(tmp_path, caplog, scenario_text):
    archive = tmp_path / "scenario.txt"
    archive.write_text(scenario_text, encoding="utf-8")

    assert run([str(archive), "-o", str(tmp_path / "out"), "--join", "concat"], caplog) == 0
    assert (tmp_path / "out" / "b.txt").read_text(encoding="utf-8") == "foo\nbar\n"


def test_custom_marker_option(tmp_path, caplog):
    archive = tmp_path / "bundle.txt"
    archive.write_text("-- FILE: x.py\nprint('x')\n>>>> y.py\n", encoding="utf-8")

    assert run([str(archive), "-o", str(tmp_path / "out"), "--marker", "-- FILE:"], caplog) == 0
    assert (tmp_path / "out" / "x.py").read_text(encoding="utf-8") == "print('x')\n>>>> y.py\n"
    assert not (tmp_path / "out" / "y.py").exists()


def test_blank_marker_is_usage_error(archive_file, caplog):
    assert run([str(archive_file), "--marker", "  "], caplog) == 2


def test_missing_argument_is_usage_error(tmp_path, monkeypatch, caplog):
    monkeypatch.chdir(tmp_path)

    assert run([], caplog) == 2
    assert list(tmp_path.iterdir()) == []


def test_unreadable_archive_exits_nonzero(tmp_path, caplog):
    out = tmp_path / "out"

    assert run([str(tmp_path / "missing.txt"), "-o", str(out)], caplog) == 1
    assert "Error processing archive" in caplog.text
    assert not out.exists()


def test_write_failure_continues_and_exits_nonzero(archive_file, tmp_path, caplog):
    out = tmp_path / "out"
    (out / "README.md").mkdir(parents=True)

    code = run([str(archive_file), "-o", str(out)], caplog)

    assert code == 1
    assert "Failed to write README.md" in caplog.text
    assert (out / "src" / "app.py").read_text(encoding="utf-8") == APP_PY
    assert "Written 2 files, 1 failed" in caplog.text


def test_escaping_path_is_reported(tmp_path, caplog):
    archive = tmp_path / "evil.txt"
    archive.write_text(">>>> ../evil.txt\npwned\n>>>> ok.txt\nfine\n", encoding="utf-8")
    out = tmp_path / "out"

    assert run([str(archive), "-o", str(out)], caplog) == 1
    assert not (tmp_path / "evil.txt").exists()
    assert (out / "ok.txt").read_text(encoding="utf-8") == "fine\n"


def test_archive_without_markers(tmp_path, caplog):
    archive = tmp_path / "plain.txt"
    archive.write_text("nothing to see here\n", encoding="utf-8")
    out = tmp_path / "out"

    assert run([str(archive), "-o", str(out)], caplog) == 0
    assert "No '>>>>' markers found" in caplog.text
    assert not out.exists()


def test_dry_run_writes_nothing(archive_file, tmp_path, caplog):
    out = tmp_path / "out"

    assert run([str(archive_file), "-o", str(out), "--dry-run"], caplog) == 0
    assert "Would write: src/app.py (from 2 parts)" in caplog.messages
    assert not out.exists()


def test_reads_standard_input(tmp_path, monkeypatch, caplog, scenario_text):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(scenario_text.encode())))

    assert run(["-", "-o", str(tmp_path)], caplog) == 0
    assert (tmp_path / "b.txt").read_text(encoding="utf-8") == "foobar\n"


def test_serve_rejects_standard_input(caplog):
    assert run(["-", "--serve"], caplog) == 2


def test_serve_and_deck_are_exclusive(archive_file, caplog):
    assert run([str(archive_file), "--serve", "--deck"], caplog) == 2


def test_quiet_hides_progress(archive_file, tmp_path, caplog):
    assert run([str(archive_file), "-o", str(tmp_path / "out"), "-q"], caplog) == 0
    assert "Written: README.md" not in caplog.messages


def test_extract_returns_failure_count(tmp_path, caplog, scenario_text):
    archive = tmp_path / "scenario.txt"
    archive.write_text(scenario_text, encoding="utf-8")
    out = tmp_path / "out"
    (out / "a.txt").mkdir(parents=True)

    with caplog.at_level(logging.INFO):
        assert extract(str(archive), str(out)) == 1


def test_invalid_path_is_reported_and_run_continues(tmp_path, caplog):
    archive = tmp_path / "nul.txt"
    archive.write_bytes(b">>>> bad\x00name.txt\nx\n>>>> ok.txt\nfine\n")
    out = tmp_path / "out"

    assert run([str(archive), "-o", str(out)], caplog) == 1
    assert "Failed to write bad\x00name.txt" in caplog.text
    assert (out / "ok.txt").read_text(encoding="utf-8") == "fine\n"
    assert "Written 1 files, 1 failed" in caplog.text

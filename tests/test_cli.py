"""Tests for cli module."""

import io
import os
import sys

import pytest

from dirtree.cli import USAGE, UsageError, main, parse_args


@pytest.fixture
def project(tmp_path):
    root = tmp_path / "proj"
    (root / "docs").mkdir(parents=True)
    (root / "docs" / "readme.txt").write_bytes(b"x" * 120)
    (root / "main.go").write_bytes(b"")
    return root


class TestParseArgs:
    def test_path_only(self):
        assert parse_args(["."]) == (".", False)

    def test_files_flag(self):
        assert parse_args([".", "-f"]) == (".", True)

    def test_other_second_argument_means_directories_only(self):
        assert parse_args([".", "-F"]) == (".", False)
        assert parse_args([".", "--files"]) == (".", False)

    def test_no_arguments(self):
        with pytest.raises(UsageError, match="usage"):
            parse_args([])

    def test_too_many_arguments(self):
        with pytest.raises(UsageError):
            parse_args([".", "-f", "extra"])


class TestMain:
    def test_directories_only(self, project):
        out = io.StringIO()
        assert main([str(project)], out) == 0
        assert out.getvalue() == "└───docs\n"

    def test_with_files(self, project):
        out = io.StringIO()
        assert main([str(project), "-f"], out) == 0
        assert out.getvalue() == (
            "├───docs\n"
            "│\t└───readme.txt (120b)\n"
            "└───main.go (empty)\n"
        )

    def test_usage_error(self, capsys):
        out = io.StringIO()
        assert main([], out) == 2
        assert out.getvalue() == ""
        assert USAGE in capsys.readouterr().err

    def test_missing_root(self, tmp_path, capsys):
        out = io.StringIO()
        assert main([str(tmp_path / "nope")], out) == 1
        assert out.getvalue() == ""
        assert capsys.readouterr().err.startswith("Error: ")

    def test_reads_sys_argv(self, project, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["dirtree", str(project), "-f"])
        assert main() == 0
        assert "└───main.go (empty)" in capsys.readouterr().out


class _FailingWriter:
    """Accepts *limit* writes, then fails like a closed pipe."""

    def __init__(self, limit: int):
        self.limit = limit
        self.lines: list[str] = []

    def write(self, text):
        if len(self.lines) >= self.limit:
            raise BrokenPipeError(32, "Broken pipe")
        self.lines.append(text)
        return len(text)


@pytest.fixture
def undecodable_dir(tmp_path):
    if sys.platform != "linux":
        pytest.skip("needs raw byte file names")
    name = os.path.join(os.fsencode(tmp_path), b"bad\xffname")
    try:
        os.mkdir(name)
    except OSError:
        pytest.skip("filesystem rejects names that are not valid UTF-8")
    return tmp_path


class TestOutputErrors:
    def test_write_failure_keeps_written_lines(self, project, capsys):
        out = _FailingWriter(limit=1)
        assert main([str(project), "-f"], out) == 1
        assert out.lines == ["├───docs\n"]
        assert capsys.readouterr().err.startswith("Error: Failed to write output")

    def test_closed_stream(self, project, capsys):
        out = io.StringIO()
        out.close()
        assert main([str(project)], out) == 1
        assert capsys.readouterr().err.startswith("Error: ")

    def test_strict_sink_rejects_undecodable_name(self, undecodable_dir, capsys):
        buf = io.BytesIO()
        out = io.TextIOWrapper(buf, encoding="utf-8", errors="strict")
        assert main([str(undecodable_dir)], out) == 1
        assert capsys.readouterr().err.startswith("Error: Failed to write output")

    def test_stdout_writes_original_bytes(self, undecodable_dir, monkeypatch):
        buf = io.BytesIO()
        stdout = io.TextIOWrapper(buf, encoding="utf-8", errors="strict")
        monkeypatch.setattr("sys.stdout", stdout)
        assert main([str(undecodable_dir)]) == 0
        stdout.flush()
        assert buf.getvalue() == "└───".encode() + b"bad\xffname\n"

"""
Tests for the command-line interface.
"""

import errno
import io
import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

import pytest
from hdump import cli
from hdump.binary_reader import ByteSource
from hdump.cli import main


class ClosedPipe(io.StringIO):
    """Stdout whose reader has gone away."""

    def write(self, text):
        raise BrokenPipeError(errno.EPIPE, "Broken pipe")


class UnreadableStream(io.RawIOBase):
    """Stream whose reads fail with EIO."""

    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError(errno.EIO, "Input/output error")


def test_dump_string_quiet(capsys):
    """Test dumping a literal string without banners."""
    assert main(['-q', '--in-string', 'Hello, world']) == 0
    out = capsys.readouterr().out
    assert out == "000000  48656c6c 6f2c2077 6f726c64" + " " * 10 + "|Hello, world|\n"


def test_banners(tmp_path, capsys):
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'\x00\x01')

    assert main([str(test_file)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "DumpFile Starts...."
    assert lines[1].startswith("000000  0001 ")
    assert lines[-1] == "DumpFile Ends...."


def test_empty_file(tmp_path, capsys):
    test_file = tmp_path / "empty.bin"
    test_file.write_bytes(b'')

    assert main(['-q', str(test_file)]) == 0
    assert capsys.readouterr().out == ""


def test_in_file_takes_precedence(tmp_path, capsys):
    first = tmp_path / "first.bin"
    second = tmp_path / "second.bin"
    first.write_bytes(b'A')
    second.write_bytes(b'B')

    assert main(['-q', '--in-file', str(first), str(second)]) == 0
    assert capsys.readouterr().out.endswith("|A|\n")


def test_end_before_begin_exits_2(capsys):
    """Test that bad offsets fail before any output."""
    assert main(['--off-begin', '10', '--off-end', '5', '--in-string', 'abc']) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "offEnd(5) must be > offBegin(10)" in captured.err


def test_missing_file_exits_1(tmp_path, capsys):
    assert main([str(tmp_path / "missing.bin")]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines()[-1] == "DumpFile Ends, RC: 1"
    assert "Open Error" in captured.err


def test_stdin(monkeypatch, capsys):
    """Test that stdin is dumped with the default offset width."""
    monkeypatch.setattr(sys, 'stdin', io.TextIOWrapper(io.BytesIO(b'hi\n')))
    assert main(['-q', '--min-off-len', '8']) == 0
    assert capsys.readouterr().out.startswith("00000000  68690a ")


def test_layout_options(capsys):
    assert main(['-q', '--upper', '--line-len', '4', '--inner-len', '2',
                 '--edge-mark', '#', '--in-string', '\x1b[m']) == 0
    assert capsys.readouterr().out == "000000  1B5B 6D   #.[m#\n"


def test_canonical(capsys):
    assert main(['-q', '--canonical', '--in-string', 'AB']) == 0
    out = capsys.readouterr().out
    assert out.startswith("00000000  41 42 ")
    assert out.endswith("|AB|\n")


def test_verbose_logs_to_stderr(capsys):
    assert main(['-q', '-v', '--in-string', 'a']) == 0
    captured = capsys.readouterr()
    assert "Offset field width: 6" in captured.err
    assert "Offset field width" not in captured.out


@pytest.mark.parametrize("extra, stage", [([], "Read"), (['--canonical'], "ReadAll")])
def test_read_failure_exits_1(monkeypatch, capsys, extra, stage):
    """Test that a read error mid-dump is reported with exit code 1."""
    monkeypatch.setattr(cli, 'open_source', lambda args: ByteSource(UnreadableStream(), 32))
    assert main(extra + ['--in-string', 'ignored']) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["DumpFile Starts....", "DumpFile Ends, RC: 1"]
    assert f"{stage} Error ==>" in captured.err


def test_closed_stdout_exits_quietly(monkeypatch, capsys):
    """Test that a reader closing stdout ends the dump without a traceback."""
    monkeypatch.setattr(sys, 'stdout', ClosedPipe())
    assert main(['-q', '--in-string', 'x' * 100]) == 1
    assert capsys.readouterr().err == ""


def test_closed_stdout_during_banner(monkeypatch):
    monkeypatch.setattr(sys, 'stdout', ClosedPipe())
    assert main(['--canonical', '--in-string', 'abc']) == 1


def test_edge_mark_must_be_one_character(capsys):
    assert main(['--edge-mark', '##', '--in-string', 'abc']) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "edgeMark" in captured.err


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['--version'])
    assert excinfo.value.code == 0
    assert "hd Version: 1.0.2" in capsys.readouterr().out


if __name__ == '__main__':
    pytest.main([__file__])

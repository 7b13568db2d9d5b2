"""Tests for termline.terminal.ProcessTerminal using pipes and in-memory streams."""

from __future__ import annotations

import io
import os

import pytest

from termline.errors import TerminalUnavailableError
from termline.terminal import ProcessTerminal


@pytest.fixture
def piped():
    """A ProcessTerminal reading from a pipe; yields (terminal, write_fd, stdout)."""
    read_fd, write_fd = os.pipe()
    stdin = os.fdopen(read_fd, "r")
    stdout = io.StringIO()
    yield ProcessTerminal(stdin=stdin, stdout=stdout), write_fd, stdout
    stdin.close()
    try:
        os.close(write_fd)
    except OSError:
        pass


class TestKeyInput:
    def test_no_key_available_on_empty_pipe(self, piped) -> None:
        terminal, _, _ = piped
        assert terminal.key_available() is False

    def test_reads_keys_in_order(self, piped) -> None:
        terminal, write_fd, _ = piped
        os.write(write_fd, b"ab\x1b[A\r")
        assert terminal.key_available() is True
        assert [terminal.read_key().key for _ in range(4)] == ["a", "b", "up", "enter"]
        assert terminal.key_available() is False

    def test_printable_payload(self, piped) -> None:
        terminal, write_fd, _ = piped
        os.write(write_fd, b"Q")
        event = terminal.read_key()
        assert event.char == "Q"

    def test_lone_escape_becomes_escape_key(self, piped) -> None:
        terminal, write_fd, _ = piped
        os.write(write_fd, b"\x1b")
        assert terminal.key_available() is True
        assert terminal.read_key().key == "escape"

    def test_function_key_sequence(self, piped) -> None:
        terminal, write_fd, _ = piped
        os.write(write_fd, b"\x1b[17~")
        event = terminal.read_key()
        assert event.key == "f6"
        assert event.char == ""

    def test_utf8_character(self, piped) -> None:
        terminal, write_fd, _ = piped
        os.write(write_fd, "é".encode("utf-8"))
        assert terminal.read_key().char == "é"

    def test_end_of_input_is_fatal(self, piped) -> None:
        terminal, write_fd, _ = piped
        os.close(write_fd)
        with pytest.raises(TerminalUnavailableError):
            terminal.key_available()


class TestOutput:
    def test_write_advances_cursor_column(self) -> None:
        stdout = io.StringIO()
        terminal = ProcessTerminal(stdin=io.StringIO(), stdout=stdout)
        terminal.write("abc")
        assert stdout.getvalue() == "abc"
        assert terminal.cursor_column() == 3

    def test_erase_last_line_without_prior_write(self) -> None:
        stdout = io.StringIO()
        terminal = ProcessTerminal(stdin=io.StringIO(), stdout=stdout)
        terminal.erase_last_line()
        # Not a real terminal: falls back to 80x24
        home = "\x1b[24;1H"
        assert stdout.getvalue() == home + " " * 79 + home
        assert terminal.cursor_column() == 0

    def test_erase_resets_cursor_column(self) -> None:
        terminal = ProcessTerminal(stdin=io.StringIO(), stdout=io.StringIO())
        terminal.write("hello")
        terminal.erase_last_line()
        assert terminal.cursor_column() == 0

    def test_closed_output_is_fatal(self) -> None:
        stdout = io.StringIO()
        terminal = ProcessTerminal(stdin=io.StringIO(), stdout=stdout)
        stdout.close()
        with pytest.raises(TerminalUnavailableError):
            terminal.write("x")

    def test_dimension_fallbacks(self) -> None:
        terminal = ProcessTerminal(stdin=io.StringIO(), stdout=io.StringIO())
        assert terminal.columns == 80
        assert terminal.rows == 24


class TestStartStop:
    def test_start_requires_file_descriptor(self) -> None:
        terminal = ProcessTerminal(stdin=io.StringIO(), stdout=io.StringIO())
        with pytest.raises(TerminalUnavailableError):
            terminal.start()

    def test_start_requires_tty(self, piped) -> None:
        terminal, _, _ = piped
        with pytest.raises(TerminalUnavailableError):
            with terminal:
                pass
        assert terminal.started is False

    def test_stop_without_start_is_noop(self) -> None:
        terminal = ProcessTerminal(stdin=io.StringIO(), stdout=io.StringIO())
        terminal.stop()
        assert terminal.started is False

    def test_unavailable_error_is_os_error(self) -> None:
        assert issubclass(TerminalUnavailableError, OSError)

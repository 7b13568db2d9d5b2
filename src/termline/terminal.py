"""Terminal abstraction for single-line, bottom-of-screen input.

Provides a ``TerminalSurface`` protocol and a concrete ``ProcessTerminal``
implementation that puts stdin into cbreak mode, reads keys without echo,
and redraws the last row of the viewport with ANSI escape sequences.
"""

from __future__ import annotations

import codecs
import logging
import os
import select
import sys
import termios
import threading
import tty
from typing import ContextManager, Protocol, TextIO

from termline.errors import TerminalUnavailableError
from termline.keys import KeyEvent, key_event_from_input
from termline.stdin_buffer import StdinBuffer

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_CURSOR_TO_ROW_START_FMT = "\x1b[{};1H"

# Seconds to wait for the rest of an escape sequence before treating a
# lone ESC as the Escape key.
ESCAPE_TIMEOUT = 0.01


# ---------------------------------------------------------------------------
# TerminalSurface protocol
# ---------------------------------------------------------------------------


class TerminalSurface(Protocol):
    """Interface the line editor needs from a terminal."""

    @property
    def lock(self) -> ContextManager[object]: ...

    @property
    def columns(self) -> int: ...

    def key_available(self) -> bool: ...

    def read_key(self) -> KeyEvent: ...

    def cursor_column(self) -> int: ...

    def erase_last_line(self) -> None: ...

    def write(self, text: str) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by ``sys.stdin``/``sys.stdout``.

    Use as a context manager, or call ``start``/``stop`` explicitly, to
    switch stdin to cbreak mode (no line buffering, no echo) and restore
    the previous settings afterwards. The cursor column is tracked from
    what this object writes; output by anyone else is seen as drift.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._lock = threading.RLock()
        self._column: int = 0
        self._stdin_buffer = StdinBuffer()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._original_termios: list | None = None

    # -- properties ---------------------------------------------------------

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(self._stdout.fileno()).lines
        except (ValueError, OSError):
            return 24

    @property
    def started(self) -> bool:
        return self._original_termios is not None

    # -- start / stop -------------------------------------------------------

    def start(self) -> None:
        """Enter cbreak mode. Raises ``TerminalUnavailableError`` if stdin is not a TTY."""
        fd = self._stdin_fd()
        if not os.isatty(fd):
            raise TerminalUnavailableError("stdin is not an interactive terminal")

        self._original_termios = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        logger.debug("Entered cbreak mode on fd %d", fd)

    def stop(self) -> None:
        """Restore the terminal attributes saved by ``start``."""
        if self._original_termios is None:
            return
        fd = self._stdin_fd()
        termios.tcsetattr(fd, termios.TCSADRAIN, self._original_termios)
        self._original_termios = None
        self._stdin_buffer.clear()
        logger.debug("Restored terminal attributes on fd %d", fd)

    def __enter__(self) -> ProcessTerminal:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    # -- input --------------------------------------------------------------

    def key_available(self) -> bool:
        """Non-blocking check for a complete key."""
        if self._stdin_buffer.has_pending:
            return True
        if self._readable(0):
            self._fill()
        return self._stdin_buffer.has_pending

    def read_key(self) -> KeyEvent:
        """Return the next key, blocking until one arrives."""
        while not self._stdin_buffer.has_pending:
            self._fill()
        sequence = self._stdin_buffer.pop()
        return key_event_from_input(sequence or "")

    # -- output -------------------------------------------------------------

    def cursor_column(self) -> int:
        return self._column

    def erase_last_line(self) -> None:
        """Blank the bottom row and leave the cursor at its first column."""
        with self._lock:
            home = _CURSOR_TO_ROW_START_FMT.format(self.rows)
            self._raw_write(home + " " * max(self.columns - 1, 0) + home)
            self._column = 0

    def write(self, text: str) -> None:
        """Write *text* at the cursor."""
        with self._lock:
            self._raw_write(text)
            self._column += len(text)

    # -- private ------------------------------------------------------------

    def _stdin_fd(self) -> int:
        try:
            return self._stdin.fileno()
        except (AttributeError, ValueError, OSError) as exc:
            raise TerminalUnavailableError("stdin has no file descriptor") from exc

    def _readable(self, timeout: float) -> bool:
        ready, _, _ = select.select([self._stdin_fd()], [], [], timeout)
        return bool(ready)

    def _fill(self) -> None:
        """Read whatever stdin has and queue the complete sequences."""
        self._read_chunk()
        # An escape sequence split across reads: wait briefly for the rest
        while self._stdin_buffer.get_buffer():
            if self._readable(ESCAPE_TIMEOUT):
                self._read_chunk()
            else:
                self._stdin_buffer.flush()

    def _read_chunk(self) -> None:
        raw = os.read(self._stdin_fd(), 4096)
        if not raw:
            raise TerminalUnavailableError("stdin reached end of file")
        self._stdin_buffer.process(self._decoder.decode(raw))

    def _raw_write(self, data: str) -> None:
        try:
            self._stdout.write(data)
            self._stdout.flush()
        except (OSError, ValueError) as exc:
            raise TerminalUnavailableError("terminal output is unavailable") from exc

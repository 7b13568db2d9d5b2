"""StdinBuffer buffers raw input and yields complete key sequences.

Terminal reads can return several keys at once, or stop in the middle of an
escape sequence. Without buffering, a partial sequence like ``ESC [`` would
be misread as an Escape keypress followed by ``[``.
"""

from __future__ import annotations

from collections import deque

ESC = "\x1b"


def _is_complete_sequence(data: str) -> str:
    """Check if a string is a complete escape sequence or needs more data.

    Returns 'complete', 'incomplete', or 'not-escape'.
    """
    if not data.startswith(ESC):
        return "not-escape"

    if len(data) == 1:
        return "incomplete"

    after_esc = data[1:]

    # CSI sequences: ESC [
    if after_esc.startswith("["):
        if after_esc.startswith("[M"):
            return "complete" if len(data) >= 6 else "incomplete"
        # Linux console function keys: ESC [ [ A
        if after_esc.startswith("[["):
            return "complete" if len(data) >= 4 else "incomplete"
        return _is_complete_csi_sequence(data)

    # SS3 sequences: ESC O
    if after_esc.startswith("O"):
        return "complete" if len(after_esc) >= 2 else "incomplete"

    # Meta key sequences: ESC followed by a single character
    return "complete"


def _is_complete_csi_sequence(data: str) -> str:
    if len(data) < 3:
        return "incomplete"

    payload = data[2:]
    last_char = payload[-1]

    if 0x40 <= ord(last_char) <= 0x7E:
        # SGR mouse reports end in M or m
        if payload.startswith("<"):
            return "complete" if last_char in ("M", "m") else "incomplete"
        return "complete"

    return "incomplete"


def _extract_complete_sequences(buffer: str) -> tuple[list[str], str]:
    """Split accumulated buffer into complete sequences.

    Returns (sequences, remainder).
    """
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        remaining = buffer[pos:]

        if not remaining.startswith(ESC):
            sequences.append(remaining[0])
            pos += 1
            continue

        seq_end = 1
        while seq_end <= len(remaining):
            candidate = remaining[:seq_end]
            if _is_complete_sequence(candidate) == "incomplete":
                seq_end += 1
                continue
            sequences.append(candidate)
            pos += seq_end
            break
        else:
            return sequences, remaining

    return sequences, ""


class StdinBuffer:
    """Accumulates raw input chunks and queues complete sequences.

    ``process`` feeds a chunk; ``pop`` returns the next complete sequence.
    An unfinished escape sequence stays buffered until more data arrives
    or ``flush`` is called.
    """

    def __init__(self) -> None:
        self._buffer: str = ""
        self._ready: deque[str] = deque()

    def process(self, data: str) -> None:
        """Feed input data into the buffer."""
        self._buffer += data
        sequences, remainder = _extract_complete_sequences(self._buffer)
        self._buffer = remainder
        self._ready.extend(sequences)

    def flush(self) -> list[str]:
        """Release whatever partial sequence is buffered as a sequence of its own."""
        if not self._buffer:
            return []

        sequences = [self._buffer]
        self._ready.append(self._buffer)
        self._buffer = ""
        return sequences

    def pop(self) -> str | None:
        """Return the next complete sequence, or ``None`` if none is queued."""
        return self._ready.popleft() if self._ready else None

    @property
    def has_pending(self) -> bool:
        return bool(self._ready)

    def get_buffer(self) -> str:
        return self._buffer

    def clear(self) -> None:
        self._buffer = ""
        self._ready.clear()

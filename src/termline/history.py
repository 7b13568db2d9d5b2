"""Bounded history of submitted lines with previous/next navigation."""

from __future__ import annotations

import logging
from collections import deque

from termline.errors import ConfigurationError

logger = logging.getLogger(__name__)


class HistoryStore:
    """Keeps the last ``max_history`` submitted lines, oldest first.

    The read cursor sits "past the newest" entry until ``previous`` is
    called. ``previous`` walks toward older entries and stops at the oldest;
    ``next`` walks back toward newer ones and, past the newest, parks the
    cursor past the end again and yields ``""``. Adding a line resets the
    cursor.
    """

    def __init__(self, max_history: int) -> None:
        if isinstance(max_history, bool) or not isinstance(max_history, int):
            raise ConfigurationError(
                f"max_history must be an integer, got {type(max_history).__name__}"
            )
        if max_history < 0:
            raise ConfigurationError(f"max_history must be >= 0, got {max_history}")

        self._max_history = max_history
        self._entries: deque[str] = deque()
        self._cursor: int = 0

    @property
    def max_history(self) -> int:
        return self._max_history

    @property
    def entries(self) -> tuple[str, ...]:
        """Stored lines, oldest first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, line: str) -> None:
        """Append *line*, evicting the oldest entry once capacity is exceeded."""
        if self._max_history > 0:
            self._entries.append(line)
            while len(self._entries) > self._max_history:
                evicted = self._entries.popleft()
                logger.debug("History full, evicted %d-char entry", len(evicted))
        self.reset_cursor()

    def previous(self) -> str:
        """Step toward older entries (clamped at the oldest) and return it."""
        if not self._entries:
            return ""
        self._cursor = max(self._cursor - 1, 0)
        return self._entries[self._cursor]

    def next(self) -> str:
        """Step toward newer entries; past the newest returns ``""``."""
        if self._cursor >= len(self._entries):
            return ""
        self._cursor += 1
        if self._cursor == len(self._entries):
            return ""
        return self._entries[self._cursor]

    def reset_cursor(self) -> None:
        """Move the read cursor past the newest entry."""
        self._cursor = len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self._cursor = 0

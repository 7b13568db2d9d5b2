"""Single-line editor driven by key events.

The editor owns the text being typed on the bottom row of the terminal.
Each call to ``update`` handles at most one key:

- Enter submits the line (into history, and to ``on_input_completed``).
- Escape clears the line, or undoes a Tab completion preview.
- Backspace drops the last character.
- Tab replaces the line with a suggestion for what was typed before the
  first Tab; pressing it again asks again for the same typed text.
- Up/Down recall history.
- F1-F12 are reported through ``on_function_key``.
- Printable characters are reported through ``on_key_pressed`` and appended.

After the key, the bottom row is redrawn if the line changed or the
terminal cursor no longer sits at the end of the line.
"""

from __future__ import annotations

import logging

from termline.config import LineEditorConfig, validate_suggestion_provider
from termline.events import InputCompletedEvent, KeyPressedEvent, Signal
from termline.history import HistoryStore
from termline.keybindings import KeyBindingsManager, KeyCategory
from termline.keys import KeyEvent
from termline.suggest import SuggestionProvider
from termline.terminal import ProcessTerminal, TerminalSurface

logger = logging.getLogger(__name__)


class LineEditor:
    """Key-event state machine for one live input line.

    Not thread-safe: a given editor must only be driven from one thread.
    Only the redraw holds the terminal's lock, so other writers sharing the
    terminal never interleave with an erase-and-rewrite.
    """

    def __init__(
        self,
        suggestion_provider: SuggestionProvider,
        max_history: int,
        terminal: TerminalSurface | None = None,
        *,
        keybindings: KeyBindingsManager | None = None,
    ) -> None:
        validate_suggestion_provider(suggestion_provider)
        self._history = HistoryStore(max_history)
        self._suggestion_provider = suggestion_provider
        self._terminal: TerminalSurface = terminal if terminal is not None else ProcessTerminal()
        self._keybindings = keybindings or KeyBindingsManager()

        self._buffer: list[str] = []
        self._cached_input: str | None = None
        self._should_refresh: bool = False

        self.on_function_key: Signal[KeyPressedEvent] = Signal()
        self.on_key_pressed: Signal[KeyPressedEvent] = Signal()
        self.on_input_completed: Signal[InputCompletedEvent] = Signal()

    @classmethod
    def from_config(
        cls, config: LineEditorConfig, terminal: TerminalSurface | None = None
    ) -> LineEditor:
        config.validate()
        return cls(
            config.suggestion_provider,
            config.max_history,
            terminal,
            keybindings=KeyBindingsManager(config.keybindings),
        )

    # -- properties ---------------------------------------------------------

    @property
    def text(self) -> str:
        """The line currently being composed."""
        return "".join(self._buffer)

    @property
    def cached_text(self) -> str:
        """What the user had typed before the current Tab completion preview."""
        return self._cached_input or ""

    @property
    def refresh_pending(self) -> bool:
        return self._should_refresh

    @property
    def history(self) -> HistoryStore:
        return self._history

    @property
    def terminal(self) -> TerminalSurface:
        return self._terminal

    @property
    def keybindings(self) -> KeyBindingsManager:
        return self._keybindings

    # -- tick ---------------------------------------------------------------

    def update(self) -> None:
        """Handle at most one pending key, then redraw if needed."""
        if self._terminal.key_available():
            self.handle_key(self._terminal.read_key())
        self.refresh()

    def handle_key(self, event: KeyEvent) -> None:
        """Apply the transition for one key without touching the terminal."""
        category: KeyCategory = self._keybindings.classify(event)

        if category == "submit":
            self._submit(event)
        elif category == "cancel":
            self._cancel()
        elif category == "delete_last":
            if self._buffer:
                self._buffer.pop()
            self._queue_for_refresh()
        elif category == "suggest":
            self._suggest()
        elif category == "history_prev":
            self._clear_input()
            self._buffer.extend(self._history.previous())
        elif category == "history_next":
            self._clear_input()
            self._buffer.extend(self._history.next())
        elif category == "function":
            self.on_function_key.emit(KeyPressedEvent(self, event.key))
        elif category == "printable":
            # Listeners see the line as it was before this character
            self.on_key_pressed.emit(KeyPressedEvent(self, event.key))
            self._buffer.append(event.char)
            self._queue_for_refresh()

    def refresh(self, force: bool = False) -> bool:
        """Redraw the line if it changed or the cursor drifted.

        Returns whether a redraw happened.
        """
        if not (
            force
            or self._should_refresh
            or self._terminal.cursor_column() != len(self._buffer)
        ):
            return False

        self._should_refresh = False
        with self._terminal.lock:
            self._terminal.erase_last_line()
            self._terminal.write(self.text)
        return True

    # -- transitions --------------------------------------------------------

    def _submit(self, event: KeyEvent) -> None:
        if not self._buffer:
            return
        text = self.text
        self.on_input_completed.emit(InputCompletedEvent(self, event.key, text))
        self._history.add(text)
        logger.debug("Submitted %d-char line", len(text))
        self._clear_input()

    def _cancel(self) -> None:
        if self._cached_input is None:
            self._clear_input()
            return
        self._buffer[:] = self._cached_input
        self._cached_input = None
        self._should_refresh = True

    def _suggest(self) -> None:
        if self._cached_input is None:
            self._cached_input = self.text
        self._buffer[:] = self._suggestion_provider.suggest(self._cached_input)
        # Keep the cache so the next Tab starts from the same typed text
        self._should_refresh = True

    def _clear_input(self) -> None:
        self._buffer.clear()
        self._queue_for_refresh()

    def _queue_for_refresh(self) -> None:
        """Mark the line dirty and commit any completion preview."""
        self._should_refresh = True
        self._cached_input = None

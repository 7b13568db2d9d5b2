"""Outward signals emitted by the line editor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from termline.keys import KeyId

E = TypeVar("E")


@dataclass(frozen=True)
class KeyPressedEvent:
    """A function key or printable key was read."""

    source: Any
    key: KeyId


@dataclass(frozen=True)
class InputCompletedEvent:
    """A non-empty line was submitted."""

    source: Any
    key: KeyId
    text: str


class Signal(Generic[E]):
    """Synchronous list of subscribers.

    Listeners are called in subscription order, inside the tick that
    emits the event. Exceptions raised by a listener propagate to the
    caller of ``emit``.
    """

    def __init__(self) -> None:
        self._listeners: list[Callable[[E], None]] = []

    def subscribe(self, fn: Callable[[E], None]) -> Callable[[], None]:
        """Subscribe to the signal. Returns an unsubscribe function."""
        self._listeners.append(fn)

        def unsubscribe() -> None:
            if fn in self._listeners:
                self._listeners.remove(fn)

        return unsubscribe

    def emit(self, event: E) -> None:
        for listener in list(self._listeners):
            listener(event)

    def __len__(self) -> int:
        return len(self._listeners)

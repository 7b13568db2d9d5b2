"""Shared fixtures for termline tests."""

from __future__ import annotations

import pytest
from virtual_terminal import VirtualTerminal

from termline.editor import LineEditor
from termline.suggest import CandidateSuggestionProvider


class AppendXProvider:
    """Suggests ``partial + "X"`` and records every call."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def suggest(self, partial: str) -> str:
        self.calls.append(partial)
        return partial + "X"


@pytest.fixture
def terminal():
    return VirtualTerminal(columns=40)


@pytest.fixture
def provider():
    return CandidateSuggestionProvider(["hello", "help", "history"])


@pytest.fixture
def append_x():
    return AppendXProvider()


@pytest.fixture
def editor(terminal, provider):
    return LineEditor(provider, 10, terminal)


@pytest.fixture
def press(editor, terminal):
    """Feed raw keys to *editor* and tick until they are consumed."""

    def _press(*data: str) -> None:
        terminal.feed(*data)
        while terminal.pending_keys:
            editor.update()

    return _press

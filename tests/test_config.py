"""Tests for termline.config.LineEditorConfig."""

from __future__ import annotations

import pytest

from termline.config import LineEditorConfig
from termline.errors import ConfigurationError
from termline.suggest import CandidateSuggestionProvider


def test_valid_config() -> None:
    config = LineEditorConfig(CandidateSuggestionProvider(), 0)
    config.validate()
    assert config.keybindings == {}


def test_missing_provider() -> None:
    with pytest.raises(ConfigurationError, match="required"):
        LineEditorConfig(None, 5).validate()


def test_provider_without_suggest() -> None:
    with pytest.raises(ConfigurationError, match="suggest"):
        LineEditorConfig("not a provider", 5).validate()


def test_negative_history() -> None:
    with pytest.raises(ConfigurationError):
        LineEditorConfig(CandidateSuggestionProvider(), -1).validate()


def test_non_integer_history() -> None:
    with pytest.raises(ConfigurationError):
        LineEditorConfig(CandidateSuggestionProvider(), 2.5).validate()


def test_unknown_keybinding_category() -> None:
    config = LineEditorConfig(
        CandidateSuggestionProvider(), 1, keybindings={"teleport": "ctrl+t"}
    )
    with pytest.raises(ConfigurationError, match="teleport"):
        config.validate()


def test_rebinding_known_category() -> None:
    config = LineEditorConfig(
        CandidateSuggestionProvider(), 1, keybindings={"suggest": "ctrl+space"}
    )
    config.validate()

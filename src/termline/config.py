"""Construction-time options for the line editor."""

from __future__ import annotations

from dataclasses import dataclass, field

from termline.errors import ConfigurationError
from termline.keybindings import KeyBindingsConfig, check_categories
from termline.suggest import SuggestionProvider


@dataclass
class LineEditorConfig:
    """Line editor configuration.

    ``suggestion_provider`` and ``max_history`` have no defaults; an empty
    ``keybindings`` dict keeps the default bindings.
    """

    suggestion_provider: SuggestionProvider
    max_history: int
    keybindings: KeyBindingsConfig = field(default_factory=dict)

    def validate(self) -> None:
        """Raise ``ConfigurationError`` for options the editor cannot run with."""
        validate_suggestion_provider(self.suggestion_provider)
        if isinstance(self.max_history, bool) or not isinstance(self.max_history, int):
            raise ConfigurationError("max_history must be an integer")
        if self.max_history < 0:
            raise ConfigurationError(f"max_history must be >= 0, got {self.max_history}")
        check_categories(self.keybindings)


def validate_suggestion_provider(provider: object) -> None:
    if provider is None:
        raise ConfigurationError("a suggestion provider is required")
    if not isinstance(provider, SuggestionProvider):
        raise ConfigurationError(
            f"{type(provider).__name__} does not provide suggest(partial)"
        )

"""Key bindings: map key identifiers onto the editor's semantic key categories."""

from __future__ import annotations

import logging
from typing import Literal, get_args

from termline.errors import ConfigurationError
from termline.keys import FUNCTION_KEYS, KeyEvent, KeyId

logger = logging.getLogger(__name__)

KeyCategory = Literal[
    "submit",
    "cancel",
    "delete_last",
    "suggest",
    "history_prev",
    "history_next",
    "function",
    "printable",
    "ignored",
]

# Categories that can be rebound; printable/ignored are derived from the key itself
BindableCategory = Literal[
    "submit",
    "cancel",
    "delete_last",
    "suggest",
    "history_prev",
    "history_next",
    "function",
]

KeyBindingsConfig = dict[BindableCategory, KeyId | list[KeyId]]

DEFAULT_KEYBINDINGS: dict[BindableCategory, KeyId | list[KeyId]] = {
    "submit": "enter",
    "cancel": "escape",
    "delete_last": "backspace",
    "suggest": "tab",
    "history_prev": "up",
    "history_next": "down",
    "function": list(FUNCTION_KEYS),
}


class KeyBindingsManager:
    """Classifies key events into a ``KeyCategory``.

    Bound keys are checked in the priority order of ``BindableCategory``;
    an unbound key with a printable payload is ``"printable"``, anything
    else is ``"ignored"``.
    """

    def __init__(self, config: KeyBindingsConfig | None = None) -> None:
        self._category_to_keys: dict[BindableCategory, list[KeyId]] = {}
        self._key_to_category: dict[KeyId, BindableCategory] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: KeyBindingsConfig) -> None:
        self._category_to_keys.clear()
        self._key_to_category.clear()

        check_categories(config)

        # Start with defaults, then override with user config
        for category in get_args(BindableCategory):
            keys = config.get(category, DEFAULT_KEYBINDINGS[category])
            key_array = keys if isinstance(keys, list) else [keys]
            self._category_to_keys[category] = list(key_array)

        # First category in priority order wins a key bound twice
        for category in reversed(get_args(BindableCategory)):
            for key in self._category_to_keys[category]:
                self._key_to_category[key] = category

    def classify(self, event: KeyEvent) -> KeyCategory:
        """Return the semantic category of *event*."""
        category = self._key_to_category.get(event.key)
        if category is not None:
            return category
        if event.is_printable:
            return "printable"
        logger.debug("Ignoring key %r", event.key)
        return "ignored"

    def matches(self, event: KeyEvent, category: BindableCategory) -> bool:
        """Check if *event* is bound to *category*."""
        return event.key in self._category_to_keys.get(category, [])

    def get_keys(self, category: BindableCategory) -> list[KeyId]:
        """Get keys bound to a category."""
        return self._category_to_keys.get(category, [])

    def set_config(self, config: KeyBindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)


def check_categories(config: KeyBindingsConfig) -> None:
    """Raise ``ConfigurationError`` for categories that cannot be rebound."""
    for category in config:
        if category not in get_args(BindableCategory):
            raise ConfigurationError(f"Unknown key category: {category!r}")

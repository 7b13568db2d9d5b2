"""termline: readline-style single-line input for character-mode terminals."""

# Configuration
from termline.config import LineEditorConfig

# Line editor core
from termline.editor import LineEditor

# Errors
from termline.errors import ConfigurationError, TerminalUnavailableError

# Signals
from termline.events import InputCompletedEvent, KeyPressedEvent, Signal

# History
from termline.history import HistoryStore

# Keybindings
from termline.keybindings import (
    DEFAULT_KEYBINDINGS,
    KeyBindingsManager,
    KeyCategory,
)

# Keyboard input handling
from termline.keys import Key, KeyEvent, KeyId, key_event_from_input, parse_key

# Input buffering
from termline.stdin_buffer import StdinBuffer

# Suggestions
from termline.suggest import CandidateSuggestionProvider, SuggestionProvider

# Terminal interface and implementations
from termline.terminal import ProcessTerminal, TerminalSurface

__all__ = [
    # Configuration
    "LineEditorConfig",
    # Core
    "LineEditor",
    # Errors
    "ConfigurationError",
    "TerminalUnavailableError",
    # Signals
    "InputCompletedEvent",
    "KeyPressedEvent",
    "Signal",
    # History
    "HistoryStore",
    # Keybindings
    "DEFAULT_KEYBINDINGS",
    "KeyBindingsManager",
    "KeyCategory",
    # Keys
    "Key",
    "KeyEvent",
    "KeyId",
    "key_event_from_input",
    "parse_key",
    # Stdin buffer
    "StdinBuffer",
    # Suggestions
    "CandidateSuggestionProvider",
    "SuggestionProvider",
    # Terminal
    "ProcessTerminal",
    "TerminalSurface",
]

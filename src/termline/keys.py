"""Keyboard input parsing for character-mode terminals.

Turns one complete raw input sequence (as split by ``StdinBuffer``) into a
key identifier such as ``"enter"``, ``"f5"`` or ``"a"``, and wraps it in a
``KeyEvent`` carrying the printable payload.
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------

KeyId = str

# ---------------------------------------------------------------------------
# Key helper object
# ---------------------------------------------------------------------------


class Key:
    """Named key constants."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    insert = "insert"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    f1 = "f1"
    f2 = "f2"
    f3 = "f3"
    f4 = "f4"
    f5 = "f5"
    f6 = "f6"
    f7 = "f7"
    f8 = "f8"
    f9 = "f9"
    f10 = "f10"
    f11 = "f11"
    f12 = "f12"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


FUNCTION_KEYS: tuple[KeyId, ...] = tuple(f"f{n}" for n in range(1, 13))

# ---------------------------------------------------------------------------
# Escape sequences
# ---------------------------------------------------------------------------

# xterm, vt100 and linux console variants
LEGACY_KEY_SEQUENCES: dict[str, KeyId] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1bOP": "f1",
    "\x1bOQ": "f2",
    "\x1bOR": "f3",
    "\x1bOS": "f4",
    "\x1b[11~": "f1",
    "\x1b[12~": "f2",
    "\x1b[13~": "f3",
    "\x1b[14~": "f4",
    "\x1b[[A": "f1",
    "\x1b[[B": "f2",
    "\x1b[[C": "f3",
    "\x1b[[D": "f4",
    "\x1b[[E": "f5",
    "\x1b[15~": "f5",
    "\x1b[17~": "f6",
    "\x1b[18~": "f7",
    "\x1b[19~": "f8",
    "\x1b[20~": "f9",
    "\x1b[21~": "f10",
    "\x1b[23~": "f11",
    "\x1b[24~": "f12",
}

# Numeric keypad in application mode sends SS3 sequences for its characters
KEYPAD_SEQUENCES: dict[str, str] = {
    "\x1bOj": "*",
    "\x1bOk": "+",
    "\x1bOl": ",",
    "\x1bOm": "-",
    "\x1bOn": ".",
    "\x1bOo": "/",
    "\x1bOp": "0",
    "\x1bOq": "1",
    "\x1bOr": "2",
    "\x1bOs": "3",
    "\x1bOt": "4",
    "\x1bOu": "5",
    "\x1bOv": "6",
    "\x1bOw": "7",
    "\x1bOx": "8",
    "\x1bOy": "9",
}


# ---------------------------------------------------------------------------
# KeyEvent
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyEvent:
    """One key read from the terminal.

    ``char`` holds the character to insert for printable keys and is empty
    for everything else. ``raw`` is the input sequence the key was parsed from.
    """

    key: KeyId
    char: str = ""
    raw: str = ""

    @property
    def is_printable(self) -> bool:
        return len(self.char) == 1


def is_printable_char(ch: str) -> bool:
    """Single code unit that inserts text (letters, digits, punctuation, space)."""
    return len(ch) == 1 and (ch == " " or ch.isprintable())


# ---------------------------------------------------------------------------
# parse_key — determine what key was pressed from raw input
# ---------------------------------------------------------------------------


def parse_key(data: str) -> KeyId | None:
    """Parse raw terminal input and return the key identifier, or ``None``.

    Printable characters map to themselves (``" "`` maps to ``"space"``).
    """
    if not data:
        return None

    if data in LEGACY_KEY_SEQUENCES:
        return LEGACY_KEY_SEQUENCES[data]
    if data in KEYPAD_SEQUENCES:
        return KEYPAD_SEQUENCES[data]

    # --- Simple single-byte keys ---
    if data == "\x1b":
        return "escape"
    if data == "\r" or data == "\n":
        return "enter"
    if data == "\t":
        return "tab"
    if data == " ":
        return "space"
    if data == "\x7f" or data == "\x08":
        return "backspace"
    if data == "\x00":
        return "ctrl+space"
    if data == "\x1b[Z":
        return "shift+tab"

    # --- Ctrl + letter (0x01 - 0x1a) ---
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # --- Alt + key (ESC prefix) ---
    if len(data) == 2 and data[0] == "\x1b":
        ch = data[1]
        if ch == "\x1b":
            return "alt+escape"
        if ch == "\r" or ch == "\n":
            return "alt+enter"
        if ch == "\x7f" or ch == "\x08":
            return "alt+backspace"
        if ch.isprintable():
            return "alt+" + ch.lower()

    # --- Plain printable character ---
    if len(data) == 1 and data.isprintable():
        return data

    return None


def key_event_from_input(data: str) -> KeyEvent:
    """Build a ``KeyEvent`` from one complete raw input sequence.

    Unrecognised sequences produce an event whose key is ``"unknown"``.
    """
    key = parse_key(data)
    if key is None:
        return KeyEvent(key="unknown", raw=data)

    if key == "space":
        return KeyEvent(key=key, char=" ", raw=data)
    if data in KEYPAD_SEQUENCES:
        return KeyEvent(key=key, char=key, raw=data)
    if is_printable_char(data):
        return KeyEvent(key=key, char=data, raw=data)
    return KeyEvent(key=key, raw=data)

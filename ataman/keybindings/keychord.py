"""
Key chord synthesis for binding mnemonics.

Every binding carries the platform representation of its mnemonic: a key
code plus modifier flags. Key codes follow the AWT extended key code table
so chords compare equal to the ones a JVM host would build for the same
key press.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any, Dict

# Characters without a dedicated virtual key get this offset + code point
UNICODE_KEY_CODE_OFFSET = 0x01000000


class Modifier(IntFlag):
    """Modifier masks (AWT *_DOWN_MASK values)."""

    NONE = 0
    SHIFT = 1 << 6
    CTRL = 1 << 7
    META = 1 << 8
    ALT = 1 << 9


# Punctuation with a dedicated virtual key code
_PUNCTUATION_KEY_CODES: Dict[str, int] = {
    " ": 0x20,  # VK_SPACE
    "!": 0x205,  # VK_EXCLAMATION_MARK
    '"': 0x98,  # VK_QUOTEDBL
    "#": 0x208,  # VK_NUMBER_SIGN
    "$": 0x203,  # VK_DOLLAR
    "&": 0x96,  # VK_AMPERSAND
    "'": 0xDE,  # VK_QUOTE
    "(": 0x207,  # VK_LEFT_PARENTHESIS
    ")": 0x20A,  # VK_RIGHT_PARENTHESIS
    "*": 0x97,  # VK_ASTERISK
    "+": 0x209,  # VK_PLUS
    ",": 0x2C,  # VK_COMMA
    "-": 0x2D,  # VK_MINUS
    ".": 0x2E,  # VK_PERIOD
    "/": 0x2F,  # VK_SLASH
    ":": 0x201,  # VK_COLON
    ";": 0x3B,  # VK_SEMICOLON
    "<": 0x99,  # VK_LESS
    "=": 0x3D,  # VK_EQUALS
    ">": 0xA0,  # VK_GREATER
    "@": 0x200,  # VK_AT
    "[": 0x5B,  # VK_OPEN_BRACKET
    "\\": 0x5C,  # VK_BACK_SLASH
    "]": 0x5D,  # VK_CLOSE_BRACKET
    "^": 0x202,  # VK_CIRCUMFLEX
    "_": 0x20B,  # VK_UNDERSCORE
    "`": 0xC0,  # VK_BACK_QUOTE
    "{": 0xA1,  # VK_BRACELEFT
    "}": 0xA2,  # VK_BRACERIGHT
}


@dataclass(frozen=True)
class KeyChord:
    """A key code plus modifier flags.

    ``char`` is the character the chord was built for. ``source`` is the
    host window token it was synthesized against; it is carried along
    but never compared.
    """

    key_code: int
    modifiers: Modifier = Modifier.NONE
    char: str = ""
    source: Any = field(default=None, compare=False, repr=False)

    @property
    def shift(self) -> bool:
        return bool(self.modifiers & Modifier.SHIFT)

    def to_key_spec(self) -> str:
        """Render as a textual key spec, e.g. "f" or "shift+f"."""
        parts = [
            name.lower()
            for name, flag in (
                ("CTRL", Modifier.CTRL),
                ("ALT", Modifier.ALT),
                ("META", Modifier.META),
                ("SHIFT", Modifier.SHIFT),
            )
            if self.modifiers & flag
        ]
        parts.append(self.char.lower() if self.shift else self.char)
        return "+".join(parts)

    def __str__(self) -> str:
        return self.to_key_spec()


def key_code_for_char(char: str) -> int:
    """Return the extended key code for a single character.

    Letters map to VK_A..VK_Z regardless of case, digits to VK_0..VK_9.
    """
    upper = char.upper()
    if len(upper) == 1 and ("A" <= upper <= "Z" or "0" <= upper <= "9"):
        return ord(upper)
    if char in _PUNCTUATION_KEY_CODES:
        return _PUNCTUATION_KEY_CODES[char]
    if len(upper) != 1:
        # e.g. "ß".upper() == "SS"
        upper = char
    return UNICODE_KEY_CODE_OFFSET + ord(upper)


def synthesize(char: str, window: Any = None) -> KeyChord:
    """
    Build the key chord for a binding mnemonic.

    Uppercase letters carry the shift modifier, everything else none.

    Args:
        char: A single character
        window: Host window token, kept on the chord as its source

    Returns:
        The KeyChord for ``char``

    Raises:
        ValueError: if ``char`` is not exactly one character
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")

    modifiers = Modifier.SHIFT if char.isupper() else Modifier.NONE
    return KeyChord(key_code_for_char(char), modifiers, char, window)

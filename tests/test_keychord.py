"""Tests for key chord synthesis."""

import pytest

from ataman.keybindings.keychord import (
    UNICODE_KEY_CODE_OFFSET,
    KeyChord,
    Modifier,
    key_code_for_char,
    synthesize,
)


class TestSynthesize:
    """Tests for synthesize."""

    def test_lowercase_has_no_shift(self):
        chord = synthesize("f")
        assert chord.modifiers == Modifier.NONE
        assert not chord.shift

    def test_uppercase_has_shift(self):
        chord = synthesize("F")
        assert chord.modifiers == Modifier.SHIFT
        assert chord.shift

    def test_case_variants_share_key_code(self):
        assert synthesize("f").key_code == synthesize("F").key_code == ord("F")

    def test_digits_and_punctuation_have_no_shift(self):
        assert not synthesize("1").shift
        assert not synthesize("/").shift

    def test_window_is_kept_but_not_compared(self):
        assert synthesize("q", window="frame-1") == synthesize("q", window="frame-2")
        assert synthesize("q", window="frame-1").source == "frame-1"

    @pytest.mark.parametrize("value", ["", "ab"])
    def test_rejects_non_single_characters(self, value):
        with pytest.raises(ValueError, match="single character"):
            synthesize(value)


class TestKeyCodes:
    """Tests for key_code_for_char."""

    def test_letters_and_digits(self):
        assert key_code_for_char("a") == 0x41
        assert key_code_for_char("Z") == 0x5A
        assert key_code_for_char("7") == 0x37

    def test_punctuation(self):
        assert key_code_for_char(",") == 0x2C
        assert key_code_for_char("[") == 0x5B

    def test_other_characters_use_unicode_offset(self):
        assert key_code_for_char("ж") == UNICODE_KEY_CODE_OFFSET + ord("Ж")
        assert key_code_for_char("?") == UNICODE_KEY_CODE_OFFSET + ord("?")


class TestKeySpec:
    """Tests for the textual rendering."""

    def test_plain(self):
        assert synthesize("f").to_key_spec() == "f"

    def test_shifted(self):
        assert str(synthesize("F")) == "shift+f"

    def test_multiple_modifiers(self):
        chord = KeyChord(ord("S"), Modifier.CTRL | Modifier.SHIFT, "S")
        assert chord.to_key_spec() == "ctrl+shift+s"

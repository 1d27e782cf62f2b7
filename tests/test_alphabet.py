"""
Tests for Alphabet Detection
============================
Tests for detect_alphabet() in turkicheck/alphabet.py: check order,
the shared schwa tie-break and resolution failures.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from turkicheck.alphabet import Alphabet, detect_alphabet, CYRILLIC_SPECIAL, LATIN_SPECIAL


class TestAlphabetEnum:
    """Tests for the Alphabet enum."""

    def test_values(self):
        assert Alphabet.CYRILLIC.value == "cyrillic"
        assert Alphabet.LATIN.value == "latin"
        assert Alphabet.MIXED.value == "mixed_alphabets"
        assert Alphabet.DIGITS.value == "invalid_digits"
        assert Alphabet.UNKNOWN.value == "unknown"

    def test_is_script(self):
        assert Alphabet.CYRILLIC.is_script
        assert Alphabet.LATIN.is_script
        assert not Alphabet.MIXED.is_script
        assert not Alphabet.DIGITS.is_script
        assert not Alphabet.UNKNOWN.is_script


class TestDetectScripts:
    """Plain and special letters resolve to a script."""

    @pytest.mark.parametrize("word", ["қала", "фото", "расым", "ҚАЛА", "бала"])
    def test_cyrillic(self, word):
        assert detect_alphabet(word) == Alphabet.CYRILLIC

    @pytest.mark.parametrize("word", ["qala", "kitap", "öküz", "QALA", "şəhr"])
    def test_latin_or_shared(self, word):
        expected = Alphabet.CYRILLIC if 'ə' in word else Alphabet.LATIN
        assert detect_alphabet(word) == expected

    def test_cyrillic_special_beats_plain_latin(self):
        """A special letter resolves the script even next to the other family."""
        assert detect_alphabet("қala") == Alphabet.CYRILLIC

    def test_latin_special_beats_plain_cyrillic(self):
        assert detect_alphabet("çай") == Alphabet.LATIN


class TestSchwaTieBreak:
    """'ə' is special for both families; Cyrillic is checked first."""

    def test_schwa_in_both_sets(self):
        assert 'ə' in CYRILLIC_SPECIAL
        assert 'ə' in LATIN_SPECIAL

    def test_schwa_alone_is_cyrillic(self):
        assert detect_alphabet("ə") == Alphabet.CYRILLIC

    def test_schwa_with_latin_special_is_cyrillic(self):
        assert detect_alphabet("şəhər") == Alphabet.CYRILLIC

    def test_schwa_in_latin_looking_word(self):
        assert detect_alphabet("ərtan") == Alphabet.CYRILLIC


class TestDetectFailures:
    """Digits, mixed scripts and letterless input."""

    @pytest.mark.parametrize("word", ["123", "қа1", "ab1", "0"])
    def test_digits(self, word):
        assert detect_alphabet(word) == Alphabet.DIGITS

    def test_digits_checked_before_specials(self):
        assert detect_alphabet("қала7") == Alphabet.DIGITS
        assert detect_alphabet("öküz7") == Alphabet.DIGITS

    def test_mixed_plain_letters(self):
        # Latin q/a with Cyrillic а/л, no special letters
        assert detect_alphabet("qалa") == Alphabet.MIXED

    @pytest.mark.parametrize("word", ["", "!!", "--", " ", "ұ"])
    def test_unknown(self, word):
        assert detect_alphabet(word) == Alphabet.UNKNOWN


class TestDetectProperties:
    """Detection depends only on the set of characters."""

    def test_order_independent(self):
        assert detect_alphabet("алқ") == detect_alphabet("қла")
        assert detect_alphabet("qалa") == detect_alphabet("aлаq")

    def test_case_insensitive(self):
        assert detect_alphabet("Қала") == detect_alphabet("қала")
        assert detect_alphabet("Kitap") == detect_alphabet("kitap")

    def test_deterministic(self):
        assert detect_alphabet("kitap") == detect_alphabet("kitap")

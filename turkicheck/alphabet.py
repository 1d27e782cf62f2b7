#!/usr/bin/env python3
"""
Alphabet Detection
==================
Resolves the script family of a word before any phonotactic check.

A word is either written in the Cyrillic-based or the Latin-based
orthography, or it fails resolution (digits, mixed scripts, no letters
at all). Only ``cyrillic`` and ``latin`` words reach the rule pipeline.

Usage:
    from turkicheck.alphabet import detect_alphabet, Alphabet

    detect_alphabet("қала")   # Alphabet.CYRILLIC
    detect_alphabet("qala")   # Alphabet.LATIN
    detect_alphabet("qалa")   # Alphabet.MIXED
"""

import re
from enum import Enum


class Alphabet(Enum):
    """Resolved script of a word, or the reason resolution failed."""
    CYRILLIC = "cyrillic"
    LATIN = "latin"
    MIXED = "mixed_alphabets"
    DIGITS = "invalid_digits"
    UNKNOWN = "unknown"

    @property
    def is_script(self) -> bool:
        """True for alphabets the rule pipeline can evaluate."""
        return self in (Alphabet.CYRILLIC, Alphabet.LATIN)


SCRIPTS = (Alphabet.CYRILLIC, Alphabet.LATIN)

# Extended Turkic letters. The schwa 'ə' is listed for both families;
# the Cyrillic set is consulted first and wins the tie.
CYRILLIC_SPECIAL = frozenset('әөүңғқһəіэ')
LATIN_SPECIAL = frozenset('öüəçşğıïâäîê')

_DIGIT_RE = re.compile(r'[0-9]')
_CYRILLIC_BASE_RE = re.compile(r'[а-яё]')
_LATIN_BASE_RE = re.compile(r'[a-z]')


def detect_alphabet(word: str) -> Alphabet:
    """
    Classify the script family of a word from its character set.

    Checks run in a fixed order and the first match wins: ASCII digits,
    Cyrillic special letters, Latin special letters, a mix of plain
    Cyrillic and plain Latin letters, then plain Latin or plain Cyrillic.

    Parameters
    ----------
    word : str
        Word to inspect; case is ignored.

    Returns
    -------
    Alphabet
        ``CYRILLIC`` or ``LATIN`` when resolved, otherwise one of
        ``DIGITS``, ``MIXED`` or ``UNKNOWN``.
    """
    w = word.lower()
    if _DIGIT_RE.search(w):
        return Alphabet.DIGITS

    chars = set(w)
    if chars & CYRILLIC_SPECIAL:
        return Alphabet.CYRILLIC
    if chars & LATIN_SPECIAL:
        return Alphabet.LATIN

    has_cyrillic = bool(_CYRILLIC_BASE_RE.search(w))
    has_latin = bool(_LATIN_BASE_RE.search(w))

    if has_cyrillic and has_latin:
        return Alphabet.MIXED
    if has_latin:
        return Alphabet.LATIN
    if has_cyrillic:
        return Alphabet.CYRILLIC
    return Alphabet.UNKNOWN


__all__ = [
    "Alphabet",
    "SCRIPTS",
    "CYRILLIC_SPECIAL",
    "LATIN_SPECIAL",
    "detect_alphabet",
]

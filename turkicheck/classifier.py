#!/usr/bin/env python3
"""
Word Classifier
===============
Runs the fixed-order phonotactic pipeline against a word and its
resolved alphabet. The first failing stage decides the verdict and
later stages are never evaluated:

    1. length            -> single_character
    2. symbols / digits  -> forbidden_symbols_or_digits
    3. forbidden letters -> forbidden_letters
    4. word-initial      -> forbidden_start: <char>
    5. forbidden cluster -> forbidden_cluster
    6. vowel harmony     -> vowel_harmony
    7. consonant runs    -> too_many_consonants

Every function here is pure; the rule tables are passed in explicitly.

Usage:
    from turkicheck.classifier import classify
    from turkicheck.rules import build_rule_set
    from turkicheck.alphabet import Alphabet

    rules = build_rule_set()
    verdict = classify("қала", Alphabet.CYRILLIC, rules)
    verdict.valid, verdict.reason   # (True, 'valid')
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Set, Tuple

from turkicheck.alphabet import Alphabet
from turkicheck.rules import RuleSet, RuleTable


MIN_LENGTH = 2
MAX_CONSONANT_RUN = 2


class Reason(Enum):
    """Closed set of verdict reasons."""
    VALID = "valid"
    SINGLE_CHARACTER = "single_character"
    FORBIDDEN_SYMBOLS = "forbidden_symbols_or_digits"
    FORBIDDEN_LETTERS = "forbidden_letters"
    FORBIDDEN_START = "forbidden_start"
    FORBIDDEN_CLUSTER = "forbidden_cluster"
    VOWEL_HARMONY = "vowel_harmony"
    TOO_MANY_CONSONANTS = "too_many_consonants"
    # Alphabet resolution failures
    MIXED_ALPHABETS = "mixed_alphabets"
    INVALID_DIGITS = "invalid_digits"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Verdict:
    """Outcome of classifying one word."""
    valid: bool
    reason: str

    @property
    def code(self) -> Reason:
        """Reason without the embedded character of a forbidden start."""
        return Reason(self.reason.split(':', 1)[0])

    def as_tuple(self) -> Tuple[bool, str]:
        return self.valid, self.reason

    def to_dict(self) -> dict:
        return {'valid': self.valid, 'reason': self.reason}


VALID = Verdict(True, Reason.VALID.value)


def _fail(reason: Reason) -> Verdict:
    return Verdict(False, reason.value)


# =============================================================================
# Pipeline Stages
# =============================================================================

def has_forbidden_symbols(word: str, table: RuleTable) -> bool:
    return any(sym in word for sym in table.forbidden_symbols)


def has_forbidden_letters(word: str, table: RuleTable) -> bool:
    w = word.lower()
    if any(letter in w for letter in table.schwa_letters):
        return True
    return any(letter in w for letter in table.forbidden_letters)


def forbidden_start(word: str, table: RuleTable) -> Optional[str]:
    """Return the case-folded first character if it may not start a word."""
    first = word[0].lower()
    return first if first in table.forbidden_starts else None


def has_forbidden_cluster(word: str, table: RuleTable) -> bool:
    w = word.lower()
    return any(cluster in w for cluster in table.forbidden_clusters)


def find_consonant_u(segment: str, table: RuleTable) -> Set[int]:
    """
    Positions of a semivowel 'у' that should not count as a vowel.

    The letter is consonantal right after one of the context vowels, or
    at the start of the segment when a context vowel follows it.
    """
    positions = set()
    letter = table.consonant_u
    if not letter:
        return positions

    w = segment.lower()
    context = table.consonant_u_context
    for i, ch in enumerate(w):
        if ch != letter:
            continue
        if i > 0 and w[i - 1] in context:
            positions.add(i)
        elif i == 0 and len(w) > 1 and w[1] in context:
            positions.add(i)
    return positions


def _segment_in_harmony(segment: str, table: RuleTable) -> bool:
    w = segment.lower()
    consonant_u = find_consonant_u(w, table)
    harmony_vowels = table.harmony_vowels

    used = [c for i, c in enumerate(w) if c in harmony_vowels and i not in consonant_u]

    # Neutral vowels fail outright, even those also listed as front.
    if any(v in table.neutral_vowels for v in used):
        return False

    used_set = set(used)
    has_front = any(v in table.front_vowels for v in used_set)
    has_back = any(
        v in table.back_vowels and v not in table.mixed_allowed for v in used_set
    )
    return not (has_front and has_back)


def check_vowel_harmony(word: str, table: RuleTable) -> bool:
    """Every space-separated segment must keep to one vowel class."""
    return all(_segment_in_harmony(part, table) for part in word.split(' ') if part)


def _match_cluster(w: str, i: int, clusters: Tuple[str, ...]) -> Optional[str]:
    for cluster in clusters:
        if w.startswith(cluster, i):
            return cluster
    return None


def check_consonant_runs(word: str, table: RuleTable) -> bool:
    """
    Scan for runs of more than two consonants.

    Vowels and whitespace reset the run. Allowed clusters are skipped as
    a unit and also reset it. A third consonant is forgiven only when the
    window of the last three characters is a special triad.
    """
    w = word.lower()
    n = len(w)
    clusters = table.clusters_longest_first
    count = 0
    i = 0

    while i < n:
        ch = w[i]
        if ch.isspace() or ch in table.vowels:
            count = 0
            i += 1
            continue

        cluster = _match_cluster(w, i, clusters)
        if cluster:
            i += len(cluster)
            count = 0
            continue

        count += 1
        if count > MAX_CONSONANT_RUN:
            if w[i - 2:i + 1] not in table.special_triads:
                return False
            count = 0
        i += 1

    return True


# =============================================================================
# Classifier
# =============================================================================

def classify(word: str, alphabet: Alphabet, rules: RuleSet) -> Verdict:
    """
    Classify a word against the rules of its alphabet.

    Parameters
    ----------
    word : str
        Word to check, any case.
    alphabet : Alphabet
        Alphabet resolved by ``detect_alphabet``. Past the length check, a
        resolution failure is returned as the verdict without running the
        rest of the pipeline.
    rules : RuleSet
        Rule tables built at startup.

    Returns
    -------
    Verdict
        ``Verdict(True, 'valid')`` or the first failing stage.
    """
    if len(word) < MIN_LENGTH:
        return _fail(Reason.SINGLE_CHARACTER)
    if not alphabet.is_script:
        return Verdict(False, alphabet.value)

    table = rules[alphabet]

    if has_forbidden_symbols(word, table):
        return _fail(Reason.FORBIDDEN_SYMBOLS)
    if has_forbidden_letters(word, table):
        return _fail(Reason.FORBIDDEN_LETTERS)

    first = forbidden_start(word, table)
    if first is not None:
        return Verdict(False, f"{Reason.FORBIDDEN_START.value}: {first}")

    if has_forbidden_cluster(word, table):
        return _fail(Reason.FORBIDDEN_CLUSTER)
    if not check_vowel_harmony(word, table):
        return _fail(Reason.VOWEL_HARMONY)
    if not check_consonant_runs(word, table):
        return _fail(Reason.TOO_MANY_CONSONANTS)

    return VALID


__all__ = [
    "Reason",
    "Verdict",
    "classify",
    "has_forbidden_symbols",
    "has_forbidden_letters",
    "forbidden_start",
    "has_forbidden_cluster",
    "find_consonant_u",
    "check_vowel_harmony",
    "check_consonant_runs",
]

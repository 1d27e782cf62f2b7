#!/usr/bin/env python3
"""
Classification Aggregator
=========================
Routes a stream of (word, payload) pairs into "correct" and "incorrect"
result mappings. The payload (usually the word's translations) is
carried through untouched.

Both mappings are keyed by word, so a word repeated across the input
(e.g. the same entry in two dictionaries) needs a policy. Since a verdict
depends on the word alone, a repeat always lands in the same mapping and
only the stored payload differs:

    overwrite   last occurrence wins (default)
    keep_first  first occurrence wins
    reject      raise DuplicateWordError
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple

from turkicheck.alphabet import detect_alphabet
from turkicheck.classifier import classify, Verdict
from turkicheck.rules import RuleSet

logger = logging.getLogger(__name__)


class DuplicatePolicy(Enum):
    """What to do with a word seen more than once."""
    OVERWRITE = "overwrite"
    KEEP_FIRST = "keep_first"
    REJECT = "reject"


class DuplicateWordError(ValueError):
    """Raised under the reject policy when a word repeats."""

    def __init__(self, word: str):
        super().__init__(f"Duplicate word in input: {word!r}")
        self.word = word


@dataclass
class IncorrectEntry:
    """A rejected word's payload and the reason it was rejected."""
    payload: Any
    reason: str

    def to_dict(self) -> dict:
        return {
            'translations': self.payload,
            'reason': self.reason,
        }


@dataclass
class AggregationResult:
    """The two result mappings plus bookkeeping."""
    correct: Dict[str, Any] = field(default_factory=dict)
    incorrect: Dict[str, IncorrectEntry] = field(default_factory=dict)
    duplicates: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.correct) + len(self.incorrect)

    def reason_counts(self) -> Counter:
        """Count of incorrect words per reason."""
        return Counter(entry.reason for entry in self.incorrect.values())

    def to_dict(self) -> dict:
        return {
            'correct': dict(self.correct),
            'incorrect': {w: e.to_dict() for w, e in self.incorrect.items()},
        }


def resolve_policy(value) -> DuplicatePolicy:
    """Accept a DuplicatePolicy or its string value."""
    if isinstance(value, DuplicatePolicy):
        return value
    try:
        return DuplicatePolicy(str(value).strip().lower())
    except ValueError:
        available = ', '.join(p.value for p in DuplicatePolicy)
        raise ValueError(
            f"Unknown duplicate policy '{value}'. Available policies: {available}"
        ) from None


def verdict_for(word: str, rules: RuleSet) -> Verdict:
    """Detect the alphabet and classify, skipping the pipeline on failure."""
    alphabet = detect_alphabet(word)
    if not alphabet.is_script:
        return Verdict(False, alphabet.value)
    return classify(word, alphabet, rules)


def aggregate(pairs: Iterable[Tuple[str, Any]],
              rules: RuleSet,
              policy=DuplicatePolicy.OVERWRITE) -> AggregationResult:
    """
    Classify every (word, payload) pair and route it into a result mapping.

    Parameters
    ----------
    pairs : iterable of (str, Any)
        Words with their opaque payloads.
    rules : RuleSet
        Rule tables built at startup.
    policy : DuplicatePolicy or str
        Handling of repeated words.

    Returns
    -------
    AggregationResult
        Every processed word ends up in exactly one of ``correct`` or
        ``incorrect``.

    Raises
    ------
    DuplicateWordError
        Under ``DuplicatePolicy.REJECT`` when a word repeats.
    """
    policy = resolve_policy(policy)
    result = AggregationResult()
    seen = set()
    repeated = set()

    for word, payload in pairs:
        if word in seen:
            if word not in repeated:
                repeated.add(word)
                result.duplicates.append(word)
            if policy is DuplicatePolicy.REJECT:
                raise DuplicateWordError(word)
            if policy is DuplicatePolicy.KEEP_FIRST:
                logger.debug("Keeping first entry for duplicate word %r", word)
                continue
            logger.debug("Duplicate word %r: later entry overwrites earlier one", word)
        seen.add(word)

        verdict = verdict_for(word, rules)
        if verdict.valid:
            result.correct[word] = payload
        else:
            result.incorrect[word] = IncorrectEntry(payload=payload, reason=verdict.reason)

    if result.duplicates and policy is DuplicatePolicy.OVERWRITE:
        logger.warning(
            "%d duplicate word(s) overwritten by later entries, first: %r",
            len(result.duplicates), result.duplicates[0],
        )

    logger.debug(
        "Aggregated %d words: %d correct, %d incorrect",
        result.total, len(result.correct), len(result.incorrect),
    )
    return result


__all__ = [
    "DuplicatePolicy",
    "DuplicateWordError",
    "IncorrectEntry",
    "AggregationResult",
    "aggregate",
    "resolve_policy",
    "verdict_for",
]

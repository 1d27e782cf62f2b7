#!/usr/bin/env python3
"""
Phonotactic Rule Tables
=======================
Loads the per-alphabet rule tables from YAML and builds the immutable
rule set the classifier runs against.

The fixed tables ship with the package (common.yaml, cyrillic.yaml,
latin.yaml). Forbidden clusters are the only part supplied at startup,
by the configuration layer.

Usage:
    from turkicheck.rules import build_rule_set, ForbiddenClusters
    from turkicheck.alphabet import Alphabet

    rules = build_rule_set(ForbiddenClusters(cyrillic=("қң",)))
    table = rules[Alphabet.CYRILLIC]
    table.forbidden_starts   # frozenset({'р', 'л', ...})
"""

from __future__ import annotations

import yaml
from pathlib import Path
from typing import Dict, Any, Iterable, Optional, Tuple, FrozenSet
from dataclasses import dataclass
from functools import lru_cache, cached_property

from turkicheck.alphabet import Alphabet, SCRIPTS


RULES_DIR = Path(__file__).parent
COMMON_FILE = 'common.yaml'


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class ForbiddenClusters:
    """Configuration-supplied substring blacklists, one per script."""
    cyrillic: Tuple[str, ...] = ()
    latin: Tuple[str, ...] = ()

    def for_alphabet(self, alphabet: Alphabet) -> Tuple[str, ...]:
        if alphabet is Alphabet.CYRILLIC:
            return self.cyrillic
        if alphabet is Alphabet.LATIN:
            return self.latin
        return ()


@dataclass(frozen=True)
class RuleTable:
    """All phonotactic tables for one alphabet. Never mutated after load."""
    alphabet: Alphabet
    forbidden_symbols: FrozenSet[str]
    forbidden_starts: FrozenSet[str]
    forbidden_letters: Tuple[str, ...]
    schwa_letters: Tuple[str, ...]
    forbidden_clusters: Tuple[str, ...]
    vowels: FrozenSet[str]
    allowed_clusters: Tuple[str, ...]      # configured order
    special_triads: FrozenSet[str]
    back_vowels: FrozenSet[str]
    front_vowels: FrozenSet[str]
    neutral_vowels: FrozenSet[str]
    mixed_allowed: FrozenSet[str]
    consonant_u: Optional[str] = None
    consonant_u_context: FrozenSet[str] = frozenset()

    @cached_property
    def harmony_vowels(self) -> FrozenSet[str]:
        """Union of the back, front and neutral classes."""
        return self.back_vowels | self.front_vowels | self.neutral_vowels

    @cached_property
    def clusters_longest_first(self) -> Tuple[str, ...]:
        """Allowed clusters ordered for longest-match lookup (stable on ties)."""
        return tuple(sorted(self.allowed_clusters, key=len, reverse=True))


@dataclass(frozen=True)
class RuleSet:
    """Alphabet-indexed collection of rule tables."""
    cyrillic: RuleTable
    latin: RuleTable

    def __getitem__(self, alphabet: Alphabet) -> RuleTable:
        if alphabet is Alphabet.CYRILLIC:
            return self.cyrillic
        if alphabet is Alphabet.LATIN:
            return self.latin
        raise KeyError(alphabet)

    def __contains__(self, alphabet: object) -> bool:
        return alphabet in SCRIPTS


# =============================================================================
# Loaders
# =============================================================================

@lru_cache(maxsize=4)
def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML file from the rules directory."""
    filepath = RULES_DIR / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Rule table not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _require(cfg: Dict[str, Any], key: str, context: str):
    value = cfg.get(key)
    if value is None:
        filename = context.split('.')[0]
        raise ValueError(f"{context}.{key} must be set in {filename}.yaml")
    return value


def normalize_clusters(clusters: Optional[Iterable[str]]) -> Tuple[str, ...]:
    """Lower-case and strip cluster entries, dropping blanks and repeats."""
    if not clusters:
        return ()
    seen = []
    for cluster in clusters:
        cluster = str(cluster).strip().lower()
        if cluster and cluster not in seen:
            seen.append(cluster)
    return tuple(seen)


def load_table(alphabet: Alphabet,
               forbidden_clusters: Iterable[str] = ()) -> RuleTable:
    """
    Build the rule table for one script.

    Parameters
    ----------
    alphabet : Alphabet
        ``Alphabet.CYRILLIC`` or ``Alphabet.LATIN``.
    forbidden_clusters : iterable of str
        Substrings that invalidate a word in this script.

    Raises
    ------
    ValueError
        If ``alphabet`` is not a script or a required table key is missing.
    """
    if not alphabet.is_script:
        raise ValueError(f"No rule table for alphabet '{alphabet.value}'")

    name = alphabet.value
    common = _load_yaml(COMMON_FILE)
    raw = _load_yaml(f'{name}.yaml')
    harmony = _require(raw, 'harmony', name)
    consonant_u = harmony.get('consonant_u') or {}

    return RuleTable(
        alphabet=alphabet,
        forbidden_symbols=frozenset(_require(common, 'forbidden_symbols', 'common')),
        forbidden_starts=frozenset(_require(raw, 'forbidden_starts', name)),
        forbidden_letters=tuple(_require(raw, 'forbidden_letters', name)),
        schwa_letters=tuple(_require(common, 'schwa_letters', 'common'))
        + tuple(raw.get('schwa_letters') or ()),
        forbidden_clusters=normalize_clusters(forbidden_clusters),
        vowels=frozenset(_require(raw, 'vowels', name)),
        allowed_clusters=tuple(_require(raw, 'allowed_clusters', name)),
        special_triads=frozenset(_require(raw, 'special_triads', name)),
        back_vowels=frozenset(_require(harmony, 'back', f'{name}.harmony')),
        front_vowels=frozenset(_require(harmony, 'front', f'{name}.harmony')),
        neutral_vowels=frozenset(_require(harmony, 'neutral', f'{name}.harmony')),
        mixed_allowed=frozenset(harmony.get('mixed_allowed') or ()),
        consonant_u=consonant_u.get('letter'),
        consonant_u_context=frozenset(consonant_u.get('context') or ()),
    )


def build_rule_set(forbidden_clusters: Optional[ForbiddenClusters] = None) -> RuleSet:
    """Build the full rule set once at startup."""
    forbidden_clusters = forbidden_clusters or ForbiddenClusters()
    return RuleSet(
        cyrillic=load_table(Alphabet.CYRILLIC, forbidden_clusters.cyrillic),
        latin=load_table(Alphabet.LATIN, forbidden_clusters.latin),
    )


__all__ = [
    "ForbiddenClusters",
    "RuleTable",
    "RuleSet",
    "load_table",
    "build_rule_set",
    "normalize_clusters",
    "RULES_DIR",
]

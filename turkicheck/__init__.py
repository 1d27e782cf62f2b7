#!/usr/bin/env python3
"""
TurkiCheck - Turkic Word Phonotactics Checker
=============================================

Classifies words written in the Cyrillic-based or Latin-based Turkic
orthography as phonotactically valid or invalid, with a machine-readable
reason for every rejection.

Quick Start
-----------
    from turkicheck import TurkiCheck

    tc = TurkiCheck()

    tc.check("қала")           # Verdict(valid=True, reason='valid')
    tc.check("расым")          # Verdict(valid=False, reason='forbidden_start: р')

    # Batch: (word, translations) pairs
    result = tc.process({"қала": ["city"], "123": ["digits"]}.items())
    result.correct             # {'қала': ['city']}
    result.incorrect["123"]    # IncorrectEntry(payload=['digits'], reason='invalid_digits')

Modules
-------
    turkicheck.alphabet     - Script detection
    turkicheck.rules        - Rule tables (YAML) and rule set construction
    turkicheck.classifier   - The phonotactic pipeline
    turkicheck.aggregator   - Routing words into correct / incorrect mappings
    turkicheck.dictionaries - JSON dictionary ingestion and result files
    turkicheck.config       - .env / app.yaml configuration

CLI Usage
---------
    python -m turkicheck check қала расым
    python -m turkicheck detect qala 123
    python -m turkicheck process dictionaries/ --output output
"""

__version__ = "0.2.0"
__author__ = "TurkiCheck"

from pathlib import Path
from typing import Any, Iterable, Optional, Tuple

from .alphabet import Alphabet, detect_alphabet
from .rules import (
    ForbiddenClusters,
    RuleSet,
    RuleTable,
    build_rule_set,
    load_table,
)
from .classifier import Reason, Verdict, classify
from .aggregator import (
    AggregationResult,
    DuplicatePolicy,
    DuplicateWordError,
    IncorrectEntry,
    aggregate,
    verdict_for,
)
from .dictionaries import (
    DictionaryError,
    expand_paths,
    iter_entries,
    parse_dictionary,
    write_results,
)
from .config import Config, get_config, load_env
from .settings import resolve_path


class TurkiCheck:
    """
    Main interface for word classification.

    Builds the configuration and rule set once; every call afterwards is
    a pure function of the word and those tables.

    Attributes
    ----------
    config : Config
        Startup configuration (forbidden clusters, output, duplicate policy)
    rules : RuleSet
        Immutable rule tables for both alphabets
    """

    def __init__(self, config: Config = None, rules: RuleSet = None):
        self._config = config or get_config()
        self._rules = rules or build_rule_set(self._config.forbidden_clusters)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def rules(self) -> RuleSet:
        return self._rules

    def detect(self, word: str) -> Alphabet:
        """Resolve the alphabet of a word."""
        return detect_alphabet(word)

    def check(self, word: str) -> Verdict:
        """Detect the alphabet and classify a single word."""
        return verdict_for(word, self._rules)

    def process(self,
                pairs: Iterable[Tuple[str, Any]],
                policy: Optional[DuplicatePolicy] = None) -> AggregationResult:
        """Classify (word, payload) pairs into correct / incorrect mappings."""
        if policy is None:
            policy = self._config.duplicate_policy
        return aggregate(pairs, self._rules, policy)

    def process_files(self,
                      paths: Iterable[Path],
                      policy: Optional[DuplicatePolicy] = None) -> AggregationResult:
        """Classify every entry of the given dictionary files and directories."""
        files = expand_paths(
            paths,
            pattern=self._config.ingestion_pattern,
            exclude=(self._config.correct_file, self._config.incorrect_file),
        )
        return self.process(iter_entries(files), policy)

    def write(self, result: AggregationResult, directory: Path = None) -> Tuple[Path, Path]:
        """Write the result mappings to the output directory (relative to cwd)."""
        return write_results(
            result,
            resolve_path(directory or self._config.output_dir),
            correct_file=self._config.correct_file,
            incorrect_file=self._config.incorrect_file,
            indent=self._config.indent,
        )


__all__ = [
    "TurkiCheck",
    "Alphabet",
    "detect_alphabet",
    "ForbiddenClusters",
    "RuleSet",
    "RuleTable",
    "build_rule_set",
    "load_table",
    "Reason",
    "Verdict",
    "classify",
    "AggregationResult",
    "DuplicatePolicy",
    "DuplicateWordError",
    "IncorrectEntry",
    "aggregate",
    "DictionaryError",
    "parse_dictionary",
    "write_results",
    "Config",
    "get_config",
    "load_env",
    "__version__",
]

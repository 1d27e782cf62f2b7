#!/usr/bin/env python3
"""
Dictionary Files
================
Ingestion and output around the classification engine.

Dictionaries are JSON objects mapping a word to its translations.
Malformed sources are logged and skipped so only well-formed
(word, payload) pairs ever reach the aggregator. Results are written
as two JSON files, one per mapping.

Usage:
    from turkicheck.dictionaries import find_dictionaries, iter_entries, write_results

    paths = find_dictionaries(Path("."))
    result = aggregate(iter_entries(paths), rules)
    write_results(result, Path("output"))
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Tuple, Union

from turkicheck.aggregator import AggregationResult

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = '*.json'
DEFAULT_CORRECT_FILE = 'correct.json'
DEFAULT_INCORRECT_FILE = 'incorrect.json'


class DictionaryError(ValueError):
    """A dictionary source could not be parsed into word -> payload pairs."""


def parse_dictionary(text: Union[str, bytes], source: str = '<input>') -> Dict[str, Any]:
    """
    Parse dictionary text into a word -> payload mapping.

    Empty-string keys are dropped.

    Raises
    ------
    DictionaryError
        If the text is not valid JSON or not a JSON object.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise DictionaryError(f"{source}: not UTF-8 ({e})") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DictionaryError(f"{source}: invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise DictionaryError(
            f"{source}: expected a JSON object, got {type(data).__name__}"
        )

    return {word: payload for word, payload in data.items() if word}


def load_dictionary(path: Path) -> Dict[str, Any]:
    """Read and parse a dictionary file."""
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DictionaryError(f"{path}: {e}") from e
    return parse_dictionary(raw, source=str(path))


def find_dictionaries(directory: Path,
                      pattern: str = DEFAULT_PATTERN,
                      exclude: Iterable[str] = (DEFAULT_CORRECT_FILE, DEFAULT_INCORRECT_FILE)
                      ) -> List[Path]:
    """List dictionary files in a directory, skipping result files."""
    excluded = set(exclude)
    return sorted(
        p for p in Path(directory).glob(pattern)
        if p.is_file() and p.name not in excluded
    )


def expand_paths(paths: Iterable[Path],
                 pattern: str = DEFAULT_PATTERN,
                 exclude: Iterable[str] = (DEFAULT_CORRECT_FILE, DEFAULT_INCORRECT_FILE)
                 ) -> List[Path]:
    """Expand directories into their dictionary files; files pass through."""
    exclude = tuple(exclude)
    expanded = []
    for path in paths:
        path = Path(path)
        if path.is_dir():
            expanded.extend(find_dictionaries(path, pattern, exclude))
        else:
            expanded.append(path)
    return expanded


def iter_entries(paths: Iterable[Path]) -> Iterator[Tuple[str, Any]]:
    """Yield (word, payload) pairs from every well-formed dictionary, in order."""
    for path in paths:
        try:
            data = load_dictionary(path)
        except DictionaryError as e:
            logger.warning("Skipping dictionary: %s", e)
            continue
        logger.debug("Loaded %d entries from %s", len(data), path)
        yield from data.items()


def write_results(result: AggregationResult,
                  directory: Path,
                  correct_file: str = DEFAULT_CORRECT_FILE,
                  incorrect_file: str = DEFAULT_INCORRECT_FILE,
                  indent: int = 4) -> Tuple[Path, Path]:
    """Write both result mappings as UTF-8 JSON. Returns the two paths."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    data = result.to_dict()
    correct_path = directory / correct_file
    incorrect_path = directory / incorrect_file

    correct_path.write_text(
        json.dumps(data['correct'], ensure_ascii=False, indent=indent),
        encoding='utf-8',
    )
    incorrect_path.write_text(
        json.dumps(data['incorrect'], ensure_ascii=False, indent=indent),
        encoding='utf-8',
    )
    return correct_path, incorrect_path


__all__ = [
    "DictionaryError",
    "parse_dictionary",
    "load_dictionary",
    "find_dictionaries",
    "expand_paths",
    "iter_entries",
    "write_results",
]

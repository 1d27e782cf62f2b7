"""
Tests for Dictionary Files
==========================
Tests for JSON dictionary ingestion and result writing
in turkicheck/dictionaries.py.
"""

import json
import logging
import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from turkicheck.aggregator import aggregate
from turkicheck.dictionaries import (
    DictionaryError,
    expand_paths,
    find_dictionaries,
    iter_entries,
    load_dictionary,
    parse_dictionary,
    write_results,
)
from turkicheck.rules import build_rule_set


def write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


class TestParseDictionary:

    def test_object(self):
        assert parse_dictionary('{"қала": ["city"]}') == {"қала": ["city"]}

    def test_bytes_with_bom(self):
        raw = '\ufeff{"qala": "city"}'.encode("utf-8")
        assert parse_dictionary(raw) == {"qala": "city"}

    def test_empty_key_dropped(self):
        assert parse_dictionary('{"": "x", "qala": "city"}') == {"qala": "city"}

    def test_invalid_json(self):
        with pytest.raises(DictionaryError, match="invalid JSON"):
            parse_dictionary("{not json", source="broken.json")

    def test_not_an_object(self):
        with pytest.raises(DictionaryError, match="expected a JSON object"):
            parse_dictionary('["қала"]')

    def test_not_utf8(self):
        with pytest.raises(DictionaryError):
            parse_dictionary(b"\xff\xfe\x00")

    def test_is_value_error(self):
        assert issubclass(DictionaryError, ValueError)


class TestLoadAndFind:

    def test_load(self, tmp_path):
        path = write_json(tmp_path / "a.json", {"қала": ["city"]})
        assert load_dictionary(path) == {"қала": ["city"]}

    def test_load_missing(self, tmp_path):
        with pytest.raises(DictionaryError):
            load_dictionary(tmp_path / "missing.json")

    def test_find_skips_results(self, tmp_path):
        write_json(tmp_path / "b.json", {})
        write_json(tmp_path / "a.json", {})
        write_json(tmp_path / "correct.json", {})
        write_json(tmp_path / "incorrect.json", {})
        (tmp_path / "notes.txt").write_text("x")
        (tmp_path / "sub.json").mkdir()

        found = find_dictionaries(tmp_path)
        assert [p.name for p in found] == ["a.json", "b.json"]

    def test_expand_paths(self, tmp_path):
        sub = tmp_path / "dicts"
        sub.mkdir()
        write_json(sub / "x.json", {})
        single = write_json(tmp_path / "y.json", {})

        assert expand_paths([sub, single]) == [sub / "x.json", single]


class TestIterEntries:

    def test_all_entries_in_order(self, tmp_path):
        a = write_json(tmp_path / "a.json", {"қала": 1, "фото": 2})
        b = write_json(tmp_path / "b.json", {"kitap": 3})
        assert list(iter_entries([a, b])) == [("қала", 1), ("фото", 2), ("kitap", 3)]

    def test_malformed_skipped(self, tmp_path, caplog):
        good = write_json(tmp_path / "good.json", {"қала": 1})
        bad = tmp_path / "bad.json"
        bad.write_text("{oops", encoding="utf-8")
        array = write_json(tmp_path / "array.json", ["қала"])

        with caplog.at_level(logging.WARNING, logger="turkicheck.dictionaries"):
            entries = list(iter_entries([bad, array, good]))

        assert entries == [("қала", 1)]
        assert "bad.json" in caplog.text
        assert "array.json" in caplog.text


class TestWriteResults:

    @pytest.fixture
    def result(self):
        rules = build_rule_set()
        return aggregate([("қала", ["city"]), ("фото", ["photo"])], rules)

    def test_writes_both_files(self, tmp_path, result):
        out = tmp_path / "output"
        correct_path, incorrect_path = write_results(result, out)

        assert correct_path == out / "correct.json"
        assert incorrect_path == out / "incorrect.json"
        assert json.loads(correct_path.read_text(encoding="utf-8")) == {"қала": ["city"]}
        assert json.loads(incorrect_path.read_text(encoding="utf-8")) == {
            "фото": {"translations": ["photo"], "reason": "forbidden_letters"}
        }

    def test_keeps_non_ascii(self, tmp_path, result):
        correct_path, _ = write_results(result, tmp_path, indent=2)
        text = correct_path.read_text(encoding="utf-8")
        assert "қала" in text
        assert "\\u" not in text

    def test_custom_names(self, tmp_path, result):
        paths = write_results(result, tmp_path, "ok.json", "bad.json")
        assert [p.name for p in paths] == ["ok.json", "bad.json"]

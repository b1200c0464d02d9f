# tests/test_dictionary.py
import logging

import pytest

from trie_dictionary import Config, DictionaryRef, TrieDictionary


def test_exists(calibration_dict):
    assert calibration_dict.exists("example")
    assert calibration_dict.exists("QUICK")
    assert "test" in calibration_dict
    assert not calibration_dict.exists("heroni")


@pytest.mark.parametrize(
    "query,expected",
    [
        ("example", "example"),
        ("sampl", "sample"),
        ("tes", "test"),
        ("quikc", "quick"),
        ("nerodh", None),
        ("", None),
    ],
)
def test_suggest(calibration_dict, query, expected):
    assert calibration_dict.suggest(query) == expected


def test_load_normalizes_lines():
    d = TrieDictionary.from_lines(["  Apple\n", "\n", "   ", "apple", "BANANA\t"])
    assert d.exists("apple")
    assert d.exists("banana")
    assert d.stats() == {"words": 2, "occurrences": 3, "max_distance": 2}


def test_duplicates_raise_frequency():
    d = TrieDictionary.from_lines(["bat", "cat", "cat"])
    assert d.suggest("hat") == "cat"


def test_tree_and_table_in_sync():
    d = TrieDictionary.from_lines(["one", "two", "two", "three"])
    assert sorted(d._freq) == list(d._tree.words())
    assert len(d) == len(d._tree) == 3


def test_source_error_propagates():
    def broken():
        yield "alpha"
        raise OSError("disk gone")

    with pytest.raises(OSError, match="disk gone"):
        TrieDictionary.from_lines(broken())


def test_config_max_distance():
    d = TrieDictionary.from_lines(["abcd"], config=Config(max_distance=1))
    assert d.suggest("ab") is None
    assert d.stats()["max_distance"] == 1


def test_load_logs_summary(caplog):
    caplog.set_level(logging.INFO, logger="trie_dictionary")
    TrieDictionary.from_lines(["x", "y"])
    messages = [r.getMessage() for r in caplog.records]
    assert any("loaded 2 distinct words" in m for m in messages)
    assert any(m.startswith("dictionary load done") for m in messages)


def test_construction_leaves_logger_level_alone():
    pkg = logging.getLogger("trie_dictionary")
    old_level, old_handlers = pkg.level, list(pkg.handlers)
    pkg.setLevel(logging.DEBUG)
    try:
        d = TrieDictionary.from_lines(["apple"], config=Config(log_level="ERROR"))
        assert pkg.level == logging.DEBUG
        DictionaryRef(d).reload(["banana"])
        assert pkg.level == logging.DEBUG
        assert pkg.handlers == old_handlers
    finally:
        pkg.setLevel(old_level)

# conftest.py - shared fixtures
import pytest

from trie_dictionary.dictionary import TrieDictionary

CALIBRATION_WORDS = ["example", "test", "sample", "correct", "quick"]


@pytest.fixture
def calibration_dict():
    return TrieDictionary.from_lines(CALIBRATION_WORDS)

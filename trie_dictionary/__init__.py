"""
trie_dictionary

Word lookup and single-best spelling suggestion backed by a trie and
Levenshtein distance.
"""

from .dictionary import TrieDictionary
from .reloadable import DictionaryRef
from .utils.config_manager import Config

__all__ = ["TrieDictionary", "DictionaryRef", "Config"]

__version__ = "0.1.0"

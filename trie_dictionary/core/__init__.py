"""
trie_dictionary.core

Data structures behind the dictionary:
 - PrefixTree for exact membership
 - levenshtein edit distance
 - SuggestionEngine ranking candidates by (distance, frequency, word)
"""

from .trie import PrefixTree, TrieNode
from .edit_distance import levenshtein
from .suggestion_engine import Candidate, FrequencyTable, SuggestionEngine

__all__ = [
    "PrefixTree",
    "TrieNode",
    "levenshtein",
    "Candidate",
    "FrequencyTable",
    "SuggestionEngine",
]

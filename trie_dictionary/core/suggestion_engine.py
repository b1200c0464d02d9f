# suggestion_engine.py
"""
SuggestionEngine - single best spelling suggestion for an unknown word.

Every word in the frequency table is scored with a full Levenshtein distance,
candidates further than `max_distance` are dropped, and the winner is the
minimum under (distance, -frequency, word). The PrefixTree is only used for
the exact-match short-circuit.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import List, NamedTuple, Optional, Tuple

from trie_dictionary.core.edit_distance import levenshtein
from trie_dictionary.core.trie import PrefixTree

logger = logging.getLogger(__name__)

DEFAULT_MAX_DISTANCE = 2


class FrequencyTable(Counter):
    """word -> number of times it appeared in the source list."""

    def add(self, word: str) -> None:
        self[word] += 1


class Candidate(NamedTuple):
    word: str
    distance: int
    frequency: int

    def rank_key(self) -> Tuple[int, int, str]:
        # smaller distance, then higher frequency, then alphabetical
        return (self.distance, -self.frequency, self.word)


def _normalize(word: str) -> str:
    return word.lower()


class SuggestionEngine:
    """
    Owns nothing itself: reads the tree and frequency table built by the
    loader. Both must already be in sync when the engine is created.
    """

    def __init__(
        self,
        tree: PrefixTree,
        freq: FrequencyTable,
        max_distance: int = DEFAULT_MAX_DISTANCE,
    ) -> None:
        if isinstance(max_distance, bool) or not isinstance(max_distance, int):
            raise ValueError(f"max_distance must be an int, got {max_distance!r}")
        if max_distance < 0:
            raise ValueError(f"max_distance must be >= 0, got {max_distance}")
        self.tree = tree
        self.freq = freq
        self.max_distance = max_distance

    def exists(self, word: str) -> bool:
        return self.tree.contains(_normalize(word))

    def candidates(self, word: str) -> List[Candidate]:
        """All table words within max_distance of the (already normalized) word."""
        out: List[Candidate] = []
        for entry, count in self.freq.items():
            d = levenshtein(word, entry)
            if d <= self.max_distance:
                out.append(Candidate(entry, d, count))
        return out

    def suggest(self, word: str) -> Optional[str]:
        """
        Return the closest known word, the word itself if it is already known,
        or None when nothing is within max_distance.
        """
        q = _normalize(word)
        if not q:
            return None

        if self.tree.contains(q):
            return q

        found = self.candidates(q)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "candidates for %r: %s",
                q,
                sorted(found, key=Candidate.rank_key),
            )
        if not found:
            return None
        return min(found, key=Candidate.rank_key).word

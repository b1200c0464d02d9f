# dictionary.py
"""
TrieDictionary - application facade.

Purpose:
 - Build the PrefixTree and FrequencyTable together from one word source
 - Simple public API for callers/tests:
     exists(word), suggest(word), stats()
 - No mutation after construction; reloads go through DictionaryRef
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from trie_dictionary.core.suggestion_engine import FrequencyTable, SuggestionEngine
from trie_dictionary.core.trie import PrefixTree
from trie_dictionary.utils.config_manager import Config
from trie_dictionary.utils.logger_utils import Log

logger = logging.getLogger(__name__)


class TrieDictionary:
    """Known-word lookup plus single best spelling suggestion.
    Public API:
      - from_lines(lines, config=None) -> TrieDictionary
      - exists(word: str) -> bool
      - suggest(word: str) -> Optional[str]
      - stats() -> Dict[str, Any]
    """

    def __init__(
        self,
        tree: PrefixTree,
        freq: FrequencyTable,
        config: Optional[Config] = None,
    ) -> None:
        self.config = config or Config()
        self._tree = tree
        self._freq = freq
        self._engine = SuggestionEngine(tree, freq, max_distance=self.config.max_distance)

    @classmethod
    def from_lines(cls, lines: Iterable[str], config: Optional[Config] = None) -> "TrieDictionary":
        """
        Build from raw lines: strip, lowercase, skip blanks.
        Errors raised by `lines` itself propagate and no dictionary is built.
        """
        tree = PrefixTree()
        freq = FrequencyTable()
        with Log.time_block("dictionary load", logger):
            for line in lines:
                word = line.strip().lower()
                if not word:
                    continue
                tree.insert(word)
                freq.add(word)
        logger.info("loaded %d distinct words (%d occurrences)", len(freq), sum(freq.values()))
        return cls(tree, freq, config)

    # Public API ---------------------------------------------------------
    def exists(self, word: str) -> bool:
        return self._engine.exists(word)

    def suggest(self, word: str) -> Optional[str]:
        return self._engine.suggest(word)

    def __contains__(self, word: str) -> bool:
        return self.exists(word)

    def __len__(self) -> int:
        return len(self._freq)

    def stats(self) -> Dict[str, Any]:
        return {
            "words": len(self._freq),
            "occurrences": sum(self._freq.values()),
            "max_distance": self._engine.max_distance,
        }

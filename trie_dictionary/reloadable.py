# reloadable.py - hot reload by building a new TrieDictionary and swapping it in.
# Readers grab `current` once and never see a half-built dictionary.

from __future__ import annotations

import logging
import threading
from typing import Iterable, Optional

from trie_dictionary.dictionary import TrieDictionary

logger = logging.getLogger(__name__)


class DictionaryRef:
    """Holds the live TrieDictionary; reload() replaces it wholesale."""

    def __init__(self, dictionary: TrieDictionary) -> None:
        self._current = dictionary
        self._write_lock = threading.Lock()
        self.generation = 0

    @property
    def current(self) -> TrieDictionary:
        return self._current

    def reload(self, lines: Iterable[str]) -> TrieDictionary:
        """
        Build a fresh dictionary from `lines` with the current config and swap
        it in. If building raises, the old dictionary stays live.
        """
        with self._write_lock:
            fresh = TrieDictionary.from_lines(lines, config=self._current.config)
            self._current = fresh
            self.generation += 1
            generation = self.generation
        logger.info("dictionary reloaded (generation %d, %d words)", generation, len(fresh))
        return fresh

    def exists(self, word: str) -> bool:
        return self._current.exists(word)

    def suggest(self, word: str) -> Optional[str]:
        return self._current.suggest(word)

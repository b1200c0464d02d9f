# trie.py
# Prefix tree for exact word membership.
# One child slot per lowercase ascii letter; anything outside a-z is skipped
# while walking, so "don't" and "dont" land on the same node.

from __future__ import annotations
from typing import Iterator, List, Optional, Tuple

ALPHABET_SIZE = 26
_ORD_A = ord("a")


def _slot(ch: str) -> int:
    """Child index for `ch`, or -1 when the char is not a-z."""
    if "a" <= ch <= "z":
        return ord(ch) - _ORD_A
    return -1


class TrieNode:
    """
    A single node in the PrefixTree.
    children: fixed list of 26 slots (None until a word passes through)
    is_word: True when the path from the root spells a complete word
    """

    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: List[Optional[TrieNode]] = [None] * ALPHABET_SIZE
        self.is_word = False


class PrefixTree:
    """
    Trie used by the dictionary as its existence check.
    Does no case folding of its own; callers lowercase before inserting
    or querying.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._count = 0

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> None:
        """
        Insert a word. Characters outside a-z are elided from the path,
        the rest of the word is still stored.
        Inserting the same word again changes nothing.
        """
        node = self._root
        for ch in word:
            idx = _slot(ch)
            if idx < 0:
                continue
            child = node.children[idx]
            if child is None:
                child = node.children[idx] = TrieNode()
            node = child
        if not node.is_word:
            node.is_word = True
            self._count += 1

    # lookup ---------------------------------------------------------
    def contains(self, word: str) -> bool:
        """Walk the same filtered path as insert(); True if it ends on a word."""
        node = self._root
        for ch in word:
            idx = _slot(ch)
            if idx < 0:
                continue
            node = node.children[idx]
            if node is None:
                return False
        return node.is_word

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    # inspection -----------------------------------------------------
    def __len__(self) -> int:
        """Number of distinct stored words (after filtering)."""
        return self._count

    def words(self) -> Iterator[str]:
        """
        Yield stored words in lexicographic order.
        Uses an explicit stack, children pushed in reverse so 'a' pops first.
        """
        stack: List[Tuple[TrieNode, str]] = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                yield prefix
            for idx in range(ALPHABET_SIZE - 1, -1, -1):
                child = node.children[idx]
                if child is not None:
                    stack.append((child, prefix + chr(_ORD_A + idx)))

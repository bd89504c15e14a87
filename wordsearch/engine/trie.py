"""Prefix tree over the active word list.

The solver walks the grid one letter at a time and asks the index whether
the letters collected so far can still grow into a word. Every operation
costs time proportional to the length of the path being looked up, and no
lookup ever raises: an unknown prefix is simply ``None``/``False``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from ..data.normalization import fold_word, normalize_word


@dataclass
class TrieNode:
    """One node per distinct prefix; terminal nodes keep the full word."""

    children: Dict[str, "TrieNode"] = field(default_factory=dict)
    word: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.word is not None


class LexiconIndex:
    """Trie answering prefix and membership queries for normalized words."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.root = TrieNode()
        self._size = 0
        for word in words:
            self.insert(word)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "LexiconIndex":
        return cls(words)

    def insert(self, word: str) -> None:
        normalized = normalize_word(word)
        if not normalized:
            return
        node = self.root
        for char in normalized:
            child = node.children.get(char)
            if child is None:
                child = TrieNode()
                node.children[char] = child
            node = child
        if node.word is None:
            self._size += 1
        node.word = normalized

    def node_at(self, path: str, start: Optional[TrieNode] = None) -> Optional[TrieNode]:
        """Return the node reached by ``path``, walking from ``start`` or the root."""

        node = start or self.root
        for char in fold_word(path):
            node = node.children.get(char)
            if node is None:
                return None
        return node

    @staticmethod
    def step(node: TrieNode, char: str) -> Optional[TrieNode]:
        return node.children.get(char)

    def contains_prefix(self, path: str) -> bool:
        if not path:
            return bool(self.root.children) or self.root.is_terminal
        return self.node_at(path) is not None

    def contains(self, word: str) -> bool:
        node = self.node_at(normalize_word(word))
        return node is not None and node is not self.root and node.is_terminal

    @staticmethod
    def is_word(node: Optional[TrieNode]) -> bool:
        return node is not None and node.is_terminal

    @staticmethod
    def word_at(node: Optional[TrieNode]) -> Optional[str]:
        return node.word if node is not None else None

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self._size

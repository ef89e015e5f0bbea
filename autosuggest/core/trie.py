# trie.py
# Prefix tree (trie) holding the autocomplete dictionary.
# Every complete word keeps a usage frequency used for ranking.
# Nodes only ever grow; the only way to drop words is clear().

from __future__ import annotations
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple

Word = str
Frequency = int

RANK_FREQUENCY = "frequency"
RANK_ALPHABETICAL = "alphabetical"
RANK_MODES = (RANK_FREQUENCY, RANK_ALPHABETICAL)


class Suggestion(NamedTuple):
    """Read-only snapshot of a dictionary entry returned by suggest()."""

    word: Word
    frequency: Frequency


def normalize_word(s: object) -> str:
    """Lowercase + trim. Anything that is not a string normalizes to ''."""
    if not isinstance(s, str):
        return ""
    return s.strip().lower()


def _check_frequency(frequency: object) -> None:
    # bool is an int subclass, but True/False as a count is a caller bug
    if isinstance(frequency, bool) or not isinstance(frequency, int):
        raise ValueError(f"frequency must be an int, got {frequency!r}")
    if frequency < 0:
        raise ValueError(f"frequency must be non-negative, got {frequency}")


class TrieNode:
    """
    A single node in the trie.
    children: char -> TrieNode
    is_word: True if an inserted word ends exactly here
    freq: accumulated frequency of that word
    word: cached normalized word (None unless is_word)
    """

    __slots__ = ("children", "is_word", "freq", "word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False
        self.freq = 0
        self.word: Optional[str] = None


class PrefixDictionary:
    """
    Trie-backed dictionary used by the AutoCompleter for:
     - exact membership checks
     - prefix suggestions ranked by frequency or alphabetically
     - learning (frequency bumps) and vocabulary growth (inserts)

    Not thread-safe: callers sharing an instance across threads must
    serialize insert/increment_frequency/clear.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._words = 0

    # insertion -----------------------------------------------------
    def insert(self, word: str, frequency: int = 1) -> None:
        """
        Insert a word, or add `frequency` to it if already present.
        Empty or non-string words are ignored.
        Raises ValueError for a negative or non-int frequency.
        """
        _check_frequency(frequency)
        w = normalize_word(word)
        if not w:
            return

        node = self._root
        for ch in w:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child

        if not node.is_word:
            self._words += 1
        node.is_word = True
        node.freq += frequency
        node.word = w

    def insert_many(self, pairs: Iterable[Tuple[str, int]]) -> int:
        """Bulk seed from (word, frequency) pairs. Returns how many pairs were fed in."""
        n = 0
        for word, frequency in pairs:
            self.insert(word, frequency)
            n += 1
        return n

    # lookup ---------------------------------------------------------
    def _find(self, s: str) -> Optional[TrieNode]:
        """Walk an already normalized string; None when the path breaks."""
        node = self._root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Exact match (case/space normalized)."""
        w = normalize_word(word)
        if not w:
            return False
        node = self._find(w)
        return node is not None and node.is_word

    def __contains__(self, word: object) -> bool:
        return self.search(word)  # type: ignore[arg-type]

    def frequency(self, word: str) -> int:
        """Stored frequency for `word`, 0 when it is not in the dictionary."""
        w = normalize_word(word)
        node = self._find(w) if w else None
        if node is None or not node.is_word:
            return 0
        return node.freq

    # suggestions ----------------------------------------------------
    def suggest(
        self, prefix: str, limit: int = 5, rank_by: str = RANK_FREQUENCY
    ) -> List[Suggestion]:
        """
        Return up to `limit` words starting with `prefix`.
        rank_by="frequency": higher freq first, ties alphabetical.
        rank_by="alphabetical": ascending by word.
        """
        if rank_by not in RANK_MODES:
            raise ValueError(f"rank_by must be one of {RANK_MODES}, got {rank_by!r}")

        p = normalize_word(prefix)
        if not p or limit <= 0:
            return []

        node = self._find(p)
        if node is None:
            return []

        out = self._collect(node)
        if rank_by == RANK_FREQUENCY:
            out.sort(key=lambda s: (-s.frequency, s.word))
        else:
            out.sort(key=lambda s: s.word)
        return out[:limit]

    def _collect(self, start: TrieNode) -> List[Suggestion]:
        """DFS (explicit stack) collecting every word in the subtree of `start`."""
        results: List[Suggestion] = []
        stack = [start]
        while stack:
            node = stack.pop()
            if node.is_word:
                results.append(Suggestion(node.word, node.freq))
            stack.extend(node.children.values())
        return results

    # learning -------------------------------------------------------
    def increment_frequency(self, word: str) -> bool:
        """
        Bump an existing word's frequency by one.
        Unknown words and bare prefixes are left alone (returns False).
        """
        w = normalize_word(word)
        if not w:
            return False
        node = self._find(w)
        if node is None or not node.is_word:
            return False
        node.freq += 1
        return True

    # stats ----------------------------------------------------------
    def word_count(self) -> int:
        return self._words

    def __len__(self) -> int:
        return self._words

    def stats(self) -> Dict[str, int]:
        """
        Structural stats for display.
        (Walks the whole tree: O(nodes). Not for hot paths.)
        """
        total_nodes = 0
        max_depth = 0
        stack = [(self._root, 0)]
        while stack:
            node, depth = stack.pop()
            total_nodes += 1
            if depth > max_depth:
                max_depth = depth
            for child in node.children.values():
                stack.append((child, depth + 1))
        return {
            "total_words": self._words,
            "total_nodes": total_nodes,
            "max_depth": max_depth,
        }

    def clear(self) -> None:
        """Drop every word."""
        self._root = TrieNode()
        self._words = 0

# autocompleter.py
"""
AutoCompleter - application facade.

Purpose:
 - Own a PrefixDictionary instance (passed in or created here, never global)
 - Seed it from the built-in word list and optional seed files
 - Simple public API for CLI/TUI/tests:
     suggest(prefix, limit, rank_by), accept(word), reject(word),
     add_word(word), load_seed(path), stats(), reset()
 - Keep the session activity feed in a FeedbackTracker
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Tuple

from autosuggest.core.default_dictionary import DEFAULT_DICTIONARY
from autosuggest.core.feedback_tracker import FeedbackTracker
from autosuggest.core.seed_loader import load_seed_file
from autosuggest.core.trie import (
    RANK_FREQUENCY,
    RANK_MODES,
    PrefixDictionary,
    Suggestion,
    normalize_word,
)
from autosuggest.utils.logger_utils import Log


class AutoCompleter:
    """Application facade exposing a small API
    Public API:
      - suggest(prefix, limit=None, rank_by=None) -> List[Suggestion]
      - accept(word) -> bool
      - reject(word) -> None
      - add_word(word) -> bool
      - load_seed(path) -> int
      - stats() -> Dict[str, Any]
      - reset() -> None
    """

    def __init__(
        self,
        dictionary: Optional[PrefixDictionary] = None,
        *,
        seed: Iterable[Tuple[str, int]] = DEFAULT_DICTIONARY,
        limit: int = 5,
        rank_by: str = RANK_FREQUENCY,
        feedback: Optional[FeedbackTracker] = None,
    ):
        if rank_by not in RANK_MODES:
            raise ValueError(f"rank_by must be one of {RANK_MODES}, got {rank_by!r}")
        self.dictionary = dictionary if dictionary is not None else PrefixDictionary()
        self.feedback = feedback if feedback is not None else FeedbackTracker()
        self.limit = limit
        self.rank_by = rank_by
        self._seed = list(seed)
        self._seed_dictionary()

    def _seed_dictionary(self) -> None:
        with Log.time_block("seed"):
            n = self.dictionary.insert_many(self._seed)
        Log.info(f"[AutoCompleter] seeded {n} entries, {self.dictionary.word_count()} words")

    # Queries ------------------------------------------------------------
    def suggest(
        self, prefix: str, limit: Optional[int] = None, rank_by: Optional[str] = None
    ) -> List[Suggestion]:
        return self.dictionary.suggest(
            prefix,
            self.limit if limit is None else limit,
            rank_by or self.rank_by,
        )

    def set_rank_by(self, rank_by: str) -> None:
        if rank_by not in RANK_MODES:
            raise ValueError(f"rank_by must be one of {RANK_MODES}, got {rank_by!r}")
        self.rank_by = rank_by

    def set_limit(self, limit: int) -> None:
        if limit <= 0:
            raise ValueError("limit must be positive")
        self.limit = limit

    # User reactions --------------------------------------------------------
    def accept(self, word: str) -> bool:
        """User picked a suggestion: bump its frequency. False if the word is unknown."""
        if not self.dictionary.increment_frequency(word):
            Log.debug(f"[AutoCompleter] accept ignored for unknown word {word!r}")
            return False
        self.feedback.record_accept(normalize_word(word))
        return True

    def reject(self, word: str) -> None:
        """User dismissed a suggestion. The dictionary is left untouched."""
        w = normalize_word(word)
        if w:
            self.feedback.record_reject(w)

    def add_word(self, word: str) -> bool:
        """Add a brand-new word with frequency 1. False if empty or already known."""
        w = normalize_word(word)
        if not w or self.dictionary.search(w):
            return False
        self.dictionary.insert(w, 1)
        self.feedback.record_added(w)
        Log.info(f"[AutoCompleter] added '{w}'")
        return True

    def load_seed(self, path: str) -> int:
        """Bulk insert a seed file on top of the current vocabulary."""
        pairs = load_seed_file(path)
        self._seed.extend(pairs)
        return self.dictionary.insert_many(pairs)

    # Inspection/reset ----------------------------------------------------
    def stats(self) -> Dict[str, Any]:
        out: Dict[str, Any] = dict(self.dictionary.stats())
        out.update(self.feedback.counts())
        return out

    def reset(self) -> None:
        """Back to the seeded vocabulary with an empty activity feed."""
        self.dictionary.clear()
        self.feedback.reset()
        self._seed_dictionary()
        Log.info("[AutoCompleter] reset")

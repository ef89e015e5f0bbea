# autosuggest/core/feedback_tracker.py
"""
FeedbackTracker
Records how the user reacts to suggestions during a session.
 - accepted / rejected / added events, newest first
 - bounded tail (old events fall off, counters keep counting)
 - quick per-word accept/reject counts
 - quiet by default; verbose mode mirrors events into the log
Nothing here touches disk; the activity feed lives as long as the process.
"""

import time
from collections import defaultdict, deque
from typing import Any, Dict, List, Optional

from autosuggest.utils.logger_utils import Log

EVENT_TYPES = ("accepted", "rejected", "added")


class FeedbackTracker:
    """
    Tracks user reactions to suggestions.
    Public API:
      record_accept(word)
      record_reject(word)
      record_added(word)
      recent(n)
      counts()
      acceptance_ratio(word)
      reset()
    """

    def __init__(self, *, max_events: int = 50, verbose: bool = False):
        if max_events <= 0:
            raise ValueError("max_events must be positive")
        self.max_events = max_events

        # newest events on the left
        self._recent = deque(maxlen=max_events)

        # totals per event type
        self._totals = defaultdict(int)

        # per-word counters
        self._accept = defaultdict(int)
        self._reject = defaultdict(int)

        self.verbose = bool(verbose)

    # Event recording --------------------------------------------------------------
    def record_accept(self, word: str):
        self._record("accepted", word)

    def record_reject(self, word: str):
        self._record("rejected", word)

    def record_added(self, word: str):
        self._record("added", word)

    def _record(self, event_type: str, word: str):
        """Internal helper for adding an event."""
        ev = {
            "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
            "type": event_type,
            "word": word,
        }
        self._recent.appendleft(ev)
        self._totals[event_type] += 1

        if event_type == "accepted":
            self._accept[word] += 1
        elif event_type == "rejected":
            self._reject[word] += 1

        if self.verbose:
            Log.info(f"[Feedback] {event_type.upper()} '{word}'")

    # Stats/queries -------------------------------------------------------------------------
    def recent(self, n: Optional[int] = None) -> List[Dict[str, Any]]:
        """Newest-first copy of the activity feed (at most n entries)."""
        events = [dict(ev) for ev in self._recent]
        return events if n is None else events[:max(0, n)]

    def counts(self) -> Dict[str, int]:
        return {t: self._totals[t] for t in EVENT_TYPES}

    def acceptance_ratio(self, word: str) -> float:
        """How often a suggestion is accepted; 0.5 when there is no history."""
        a = self._accept.get(word, 0)
        r = self._reject.get(word, 0)
        total = a + r
        return (a / total) if total else 0.5

    def reset(self):
        self._recent.clear()
        self._totals.clear()
        self._accept.clear()
        self._reject.clear()

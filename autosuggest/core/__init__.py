"""
autosuggest.core

The engine behind AutoSuggest.
Contains:
 - the trie-backed word dictionary (PrefixDictionary)
 - the built-in seed vocabulary and seed file loading
 - session feedback tracking (accept / reject / add)
 - the AutoCompleter facade used by the CLI and TUI
"""

from .trie import PrefixDictionary, Suggestion, RANK_FREQUENCY, RANK_ALPHABETICAL
from .feedback_tracker import FeedbackTracker
from .seed_loader import SeedFormatError, load_seed_file
from .autocompleter import AutoCompleter

__all__ = [
    "PrefixDictionary",
    "Suggestion",
    "RANK_FREQUENCY",
    "RANK_ALPHABETICAL",
    "FeedbackTracker",
    "SeedFormatError",
    "load_seed_file",
    "AutoCompleter",
]

"""
autosuggest

Frequency-ranked prefix autocompletion backed by a trie, with a Rich CLI
and a Textual TUI on top.
"""

from autosuggest.core import AutoCompleter, PrefixDictionary, Suggestion

__all__ = ["AutoCompleter", "PrefixDictionary", "Suggestion"]

__version__ = "0.1.0"

# tui_app.py - AutoSuggest TUI Application
# -------------------------------------------------------
# Text based terminal UI around the AutoCompleter.
# Features:
#  - Live suggestions on every keystroke
#  - Up/Down to move, Enter or TAB to accept, Ctrl+X to reject, Esc to hide
#  - Enter with no suggestions shown adds the typed word to the dictionary
#  - Dictionary stats, recent activity and query latency side panels
# Accepted words climb the ranking straight away, so learning is visible.
# -------------------------------------------------------

from __future__ import annotations
import time
from typing import List, Optional

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from autosuggest.core.autocompleter import AutoCompleter
from autosuggest.core.feedback_tracker import FeedbackTracker
from autosuggest.core.seed_loader import SeedFormatError
from autosuggest.core.trie import Suggestion
from autosuggest.utils.config_manager import Config
from autosuggest.utils.logger_utils import Log

ACTIVITY_ICONS = {"accepted": "[green]✓[/green]", "rejected": "[red]✗[/red]", "added": "[cyan]+[/cyan]"}


class SuggestionPanel(Static):
    """
    Right-side suggestion list.
    The typed prefix is highlighted in each word and the selected row is marked.
    """
    def update_predictions(self, suggestions: List[Suggestion], selected: int, prefix: str):
        if not suggestions:
            self.update("[dim]No suggestions[/dim]")
            return

        cut = len(prefix.strip())
        lines = []
        for i, s in enumerate(suggestions):
            marker = "[reverse]" if i == selected else ""
            end = "[/reverse]" if i == selected else ""
            head, tail = escape(s.word[:cut]), escape(s.word[cut:])
            lines.append(f"{marker}[b]{i + 1}[/b] [green]{head}[/green]{tail}  "
                         f"[dim]{s.frequency}[/dim]{end}")
        self.update("\n".join(lines))


class StatsView(Static):
    """Word / node / depth counters for the live dictionary."""
    def update_stats(self, stats):
        nodes = stats["total_nodes"]
        ratio = stats["total_words"] / nodes if nodes else 0.0
        self.update(
            f"[b]Words:[/b] {stats['total_words']:,}   "
            f"[b]Nodes:[/b] {nodes:,}   "
            f"[b]Max depth:[/b] {stats['max_depth']}   "
            f"[dim]{ratio:.1%} words per node[/dim]"
        )


class ActivityView(Static):
    """Newest-first feed of accepted / rejected / added words."""
    def update_activity(self, events):
        if not events:
            self.update("[dim]No activity yet[/dim]")
            return
        self.update("\n".join(
            f"{ACTIVITY_ICONS.get(ev['type'], '?')} {escape(ev['word'])} [dim]{ev['timestamp'][11:]}[/dim]"
            for ev in events
        ))


class TypingLatency(Static):
    """Bottom-left readout showing how long the last lookup took."""
    def set_latency(self, seconds: float):
        self.update(f"[dim]Latency:[/dim] {seconds * 1000:.2f}ms")


# Main Application -----------------------------------------------------------------
class TUIAutocompleter(App):
    """
    The main Textual app.
    Architecture:
     - UI events to AutoCompleter
     - AutoCompleter results to reactive state
     - reactive state to UI updates
    """
    TITLE = "AutoSuggest"

    CSS = """
    #left { width: 2fr; padding: 1; }
    #right { width: 1fr; padding: 1; border-left: solid $accent; }
    #stats { margin-top: 1; }
    #activity { margin-top: 1; height: 1fr; }
    #bottom { height: 1; }
    #status { padding-left: 2; }
    """

    # priority so the focused Input doesn't swallow them
    BINDINGS = [
        Binding("tab", "accept_top", "Accept top", priority=True),
        Binding("down", "select_next", "Next", priority=True),
        Binding("up", "select_previous", "Previous", priority=True),
        Binding("ctrl+x", "reject_selected", "Reject", priority=True),
        Binding("escape", "hide_suggestions", "Hide", priority=True),
    ]

    # reactive values that refresh widgets when changed
    suggestions = reactive([], init=False, always_update=True)
    selected = reactive(0, init=False)
    latency = reactive(0.0, init=False)

    def __init__(self, cfg: Optional[Config] = None, completer: Optional[AutoCompleter] = None):
        super().__init__()
        self.cfg = cfg if cfg is not None else Config()
        # console echo would draw over the screen
        Log.configure(path=self.cfg.get("log_path") or None, echo=False)

        if completer is None:
            completer = AutoCompleter(
                limit=self.cfg.get("max_suggestions"),
                rank_by=self.cfg.get("rank_by"),
                feedback=FeedbackTracker(max_events=self.cfg.get("activity_limit")),
            )
        self.ac = completer
        self._seed_error = ""
        if self.cfg.get("seed_file"):
            try:
                self.ac.load_seed(self.cfg.get("seed_file"))
            except (OSError, SeedFormatError) as e:
                Log.error(f"[TUI] seed file failed: {e}")
                self._seed_error = str(e)
        self.user_text = ""

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Container(id="left"):
                yield Input(placeholder="Start typing…", id="text_input")
                yield StatsView(id="stats")
                yield ActivityView(id="activity")
            with Container(id="right"):
                yield SuggestionPanel(id="predictions")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
            yield Static(id="status")
        yield Footer()

    def on_mount(self) -> None:
        """Once UI is ready fill the panels and focus the input."""
        self.query_one(Input).focus()
        self.query_one(SuggestionPanel).update_predictions([], 0, "")
        self._refresh_side_panels()
        if self._seed_error:
            self._status(f"[red]Seed file not loaded:[/red] {escape(self._seed_error)}")

    def _refresh_side_panels(self) -> None:
        self.query_one(StatsView).update_stats(self.ac.dictionary.stats())
        self.query_one(ActivityView).update_activity(self.ac.feedback.recent(15))

    def _status(self, markup: str) -> None:
        self.query_one("#status", Static).update(markup)

    # Typing: Input has changed so update suggestions
    async def on_input_changed(self, event: Input.Changed) -> None:
        self.user_text = event.value
        if not event.value.strip():
            self.suggestions = []
            return

        start = time.perf_counter()
        results = self.ac.suggest(event.value)
        self.latency = time.perf_counter() - start
        self.selected = 0
        self.suggestions = results

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter: accept the highlighted suggestion, or add the typed word when none are shown."""
        if self.suggestions:
            self.accept_word(self.suggestions[self.selected].word)
            return
        word = event.value.strip()
        if not word:
            return
        if self.ac.add_word(word):
            self._status(f"[cyan]Added:[/cyan] {escape(word.lower())}")
            self._clear_input()
        else:
            self._status(f"[dim]{escape(word)} is already known[/dim]")
        self._refresh_side_panels()

    # Reactive state (watcher functions) ---------------------------------------
    def watch_suggestions(self, suggestions):
        self.query_one(SuggestionPanel).update_predictions(suggestions, self.selected, self.user_text)

    def watch_selected(self, selected):
        self.query_one(SuggestionPanel).update_predictions(self.suggestions, selected, self.user_text)

    def watch_latency(self, latency):
        self.query_one(TypingLatency).set_latency(latency)

    # Actions ----------------------------------------------------------------------
    def action_accept_top(self):
        if self.suggestions:
            self.accept_word(self.suggestions[0].word)

    def action_select_next(self):
        if self.suggestions:
            self.selected = (self.selected + 1) % len(self.suggestions)

    def action_select_previous(self):
        if self.suggestions:
            self.selected = (self.selected - 1) % len(self.suggestions)

    def action_reject_selected(self):
        """Hide the highlighted suggestion for this query; frequencies stay as they are."""
        if not self.suggestions:
            return
        word = self.suggestions[self.selected].word
        self.ac.reject(word)
        remaining = [s for s in self.suggestions if s.word != word]
        self.selected = min(self.selected, max(len(remaining) - 1, 0))
        self.suggestions = remaining
        self._status(f"[red]Rejected:[/red] {escape(word)}")
        self._refresh_side_panels()

    def action_hide_suggestions(self):
        self.suggestions = []

    # Word acceptance logic ---------------------------------------------------------------
    def accept_word(self, word: str):
        """Bump the word's frequency and start over with an empty input."""
        self.ac.accept(word)
        self._status(f"[green]Accepted:[/green] {escape(word)} "
                     f"[dim]({self.ac.dictionary.frequency(word)})[/dim]")
        self._clear_input()
        self._refresh_side_panels()

    def _clear_input(self):
        self.query_one(Input).value = ""
        self.user_text = ""
        self.suggestions = []


if __name__ == "__main__":
    TUIAutocompleter().run()

"""
cli.py - command line interface for AutoSuggest
Features:
- Ranked completions for whatever prefix you type
- Accept (learn), reject, or add new words straight from the prompt
- Live dictionary stats and a session activity feed
- Uses Rich for tables and formatting
"""

import argparse
import json
import sys
import time
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.prompt import Prompt
from rich.markup import escape
from rich import box

from autosuggest.core.autocompleter import AutoCompleter
from autosuggest.core.feedback_tracker import FeedbackTracker
from autosuggest.core.seed_loader import SeedFormatError
from autosuggest.core.trie import RANK_MODES, Suggestion
from autosuggest.utils.config_manager import Config
from autosuggest.utils.logger_utils import Log
from autosuggest.utils.metrics_tracker import Metrics

HELP = (
    "Commands: /stats /activity /rank <frequency|alphabetical> /limit <n> "
    "/add <word> /config /reset /help /quit"
)


class CLI:
    """Command-line interface (CLI) class to manage user interaction with the autocompleter."""
    def __init__(self, cfg: Optional[Config] = None, console: Optional[Console] = None,
                 completer: Optional[AutoCompleter] = None):
        """
        Initialize the CLI assistant:
        - Loads config and applies logger settings
        - Builds (or takes) the AutoCompleter and seeds it
        - Initializes latency metrics
        """
        self.cfg = cfg if cfg is not None else Config()
        self.console = console if console is not None else Console()
        Log.configure(path=self.cfg.get("log_path") or None, echo=self.cfg.get("log_echo"))

        if completer is None:
            completer = AutoCompleter(
                limit=self.cfg.get("max_suggestions"),
                rank_by=self.cfg.get("rank_by"),
                feedback=FeedbackTracker(max_events=self.cfg.get("activity_limit")),
            )
            seed_file = self.cfg.get("seed_file")
            if seed_file:
                self._load_seed(completer, seed_file)
        self.ac = completer
        self.metrics = Metrics()
        self.running = True

    def _load_seed(self, completer: AutoCompleter, path: str):
        try:
            n = completer.load_seed(path)
        except (OSError, SeedFormatError) as e:
            Log.error(f"[CLI] seed file failed: {e}")
            self.console.print(f"[red]Seed file not loaded:[/red] {escape(str(e))}")
            return
        self.console.print(f"[dim]Loaded {n} entries from {escape(path)}[/dim]")

    def run(self):
        """
        Main interactive loop of CLI:
        - Prompts the user for input.
        - Handles slash commands.
        - Shows suggestions for anything else.
        """
        self.console.rule("[bold magenta]AutoSuggest[/bold magenta]")
        self.console.print(f"[cyan]{self.ac.dictionary.word_count()} words loaded. Type a prefix.[/cyan]")
        self.console.print(HELP + "\n")

        # run loop as long as CLI is running
        while self.running:
            try:
                fragment = Prompt.ask("[green]Prefix[/green]", default="", console=self.console)
                if not fragment.strip():
                    continue

                if fragment.startswith("/"):
                    self.handle_command(fragment)
                    continue

                self._process_input(fragment)
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break

    # COMMAND HANDLING -----------------------------------------------------------
    def handle_command(self, cmd: str):
        """Handles special slash commands."""
        name, _, arg = cmd.strip().partition(" ")
        arg = arg.strip()

        if name == "/quit":
            self._exit()
        elif name == "/stats":
            self._show_stats()
        elif name == "/activity":
            self._show_activity()
        elif name == "/rank":
            self._set_rank(arg)
        elif name == "/limit":
            self._set_limit(arg)
        elif name == "/add":
            self._add_word(arg)
        elif name == "/config":
            self.console.print(Panel(Text(self.cfg.show()), title="Config", border_style="cyan"))
        elif name == "/reset":
            self.ac.reset()
            self.metrics.reset()
            self.console.print("[yellow]Dictionary reset to seed words.[/yellow]")
        elif name == "/help":
            self.console.print(HELP)
        else:
            self.console.print(f"[red]Unknown command:[/red] {escape(cmd)}")

    def _set_rank(self, mode: str):
        if mode not in RANK_MODES:
            self.console.print(f"[red]Rank must be one of:[/red] {', '.join(RANK_MODES)}")
            return
        self.ac.set_rank_by(mode)
        self.cfg.set("rank_by", mode)
        self.console.print(f"[green]Ranking by {mode}.[/green]")

    def _set_limit(self, raw: str):
        if not raw.isdigit() or int(raw) <= 0:
            self.console.print("[red]Limit must be a positive integer.[/red]")
            return
        self.ac.set_limit(int(raw))
        self.cfg.set("max_suggestions", int(raw))
        self.console.print(f"[green]Showing up to {raw} suggestions.[/green]")

    def _add_word(self, word: str):
        if self.ac.add_word(word):
            self.console.print(f"[cyan]Added:[/cyan] {escape(word.strip().lower())}")
        elif word.strip():
            self.console.print(f"[dim]'{escape(word.strip())}' is already in the dictionary.[/dim]")
        else:
            self.console.print("[red]Nothing to add.[/red]")

    # CORE INPUT PROCESSING ---------------------------------------------------------------
    def _process_input(self, fragment: str):
        """
        Loop:
        Prediction -> display -> user choice -> apply
        """
        suggestions = self.suggest(fragment)
        if not suggestions:
            self.console.print("[dim](no suggestions, /add it to teach a new word)[/dim]")
            return

        self.display_suggestions(fragment, suggestions)
        choice = Prompt.ask("Pick # / -# to reject / new word / Enter to skip",
                            default="", console=self.console)
        self.apply_choice(suggestions, choice)

    def suggest(self, fragment: str) -> List[Suggestion]:
        t0 = time.perf_counter()
        suggestions = self.ac.suggest(fragment)
        self.metrics.record("suggest_time", time.perf_counter() - t0)
        return suggestions

    def apply_choice(self, suggestions: List[Suggestion], choice: str) -> Optional[str]:
        """
        Apply the user's answer to a suggestion list.
        Returns "accepted", "rejected", "added" or None when nothing happened.
        """
        choice = choice.strip()
        if not choice:
            return None

        # accept suggestion using corresponding number
        if choice.isdigit():
            idx = int(choice) - 1
            if 0 <= idx < len(suggestions):
                word = suggestions[idx].word
                self.ac.accept(word)
                self.console.print(f"[green]Accepted:[/green] {escape(word)}  "
                                   f"[dim](frequency {self.ac.dictionary.frequency(word)})[/dim]")
                return "accepted"
            self.console.print(f"[red]No suggestion #{escape(choice)}[/red]")
            return None

        # reject suggestion: -N
        if choice.startswith("-") and choice[1:].isdigit():
            idx = int(choice[1:]) - 1
            if 0 <= idx < len(suggestions):
                word = suggestions[idx].word
                self.ac.reject(word)
                self.console.print(f"[red]Rejected:[/red] {escape(word)}")
                return "rejected"
            self.console.print(f"[red]No suggestion #{choice[1:]}[/red]")
            return None

        # custom word
        if self.ac.add_word(choice):
            self.console.print(f"[cyan]Added custom:[/cyan] {escape(choice.lower())}")
            return "added"
        self.console.print(f"[dim]'{escape(choice)}' is already known.[/dim]")
        return None

    # DISPLAY -------------------------------------------------------------------------------
    def display_suggestions(self, prefix: str, suggestions: List[Suggestion]):
        """Numbered table of suggestions with the typed prefix highlighted."""
        table = Table(title=f"Suggestions ({self.ac.rank_by})", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word")
        table.add_column("Freq", justify="right", style="magenta")

        cut = len(prefix.strip())
        for i, s in enumerate(suggestions, 1):
            word = Text(s.word[:cut], style="bold green")
            word.append(s.word[cut:])
            table.add_row(str(i), word, str(s.frequency))
        self.console.print(table)

    def _show_stats(self):
        st = self.ac.stats()
        ratio = st["total_words"] / st["total_nodes"] if st["total_nodes"] else 0.0
        t = Table(title="Dictionary", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", justify="right")
        t.add_row("Words", f"{st['total_words']:,}")
        t.add_row("Nodes", f"{st['total_nodes']:,}")
        t.add_row("Max depth", str(st["max_depth"]))
        t.add_row("Words per node", f"{ratio:.1%}")
        t.add_row("Accepted", str(st["accepted"]))
        t.add_row("Rejected", str(st["rejected"]))
        t.add_row("Added", str(st["added"]))
        t.add_row("Avg suggest", f"{self.metrics.avg('suggest_time') * 1000:.2f} ms")
        self.console.print(t)

    def _show_activity(self):
        events = self.ac.feedback.recent(20)
        if not events:
            self.console.print("[dim]No activity yet.[/dim]")
            return
        self.console.print(Panel(Text(json.dumps(events, indent=2)), title="Recent Activity",
                                 border_style="yellow"))

    # EXIT ------------------------------------------------------------------------
    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        Log.info(f"[CLI] session ended: {json.dumps(self.ac.feedback.counts())}")
        self.running = False


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="autosuggest", description="Trie-backed word autocompletion.")
    p.add_argument("--config", default="config.json", help="path to the JSON config file")
    p.add_argument("--tui", action="store_true", help="start the live Textual interface")
    p.add_argument("--rank-by", choices=RANK_MODES, help="override the configured ranking")
    p.add_argument("--limit", type=int, help="override the configured number of suggestions")
    p.add_argument("--seed-file", help="extra word list (word[,frequency] per line)")
    p.add_argument("--verbose", action="store_true", help="echo log lines to the console")
    return p


def main(argv=None) -> int:
    """Console entry point."""
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    Log.configure(path=cfg.get("log_path") or None)
    if args.rank_by:
        cfg.set("rank_by", args.rank_by, persist=False)
    if args.limit is not None:
        if args.limit <= 0:
            print("--limit must be positive", file=sys.stderr)
            return 2
        cfg.set("max_suggestions", args.limit, persist=False)
    if args.seed_file:
        cfg.set("seed_file", args.seed_file, persist=False)
    if args.verbose:
        cfg.set("log_echo", True, persist=False)

    if args.tui:
        from autosuggest.tui_app import TUIAutocompleter

        TUIAutocompleter(cfg).run()
    else:
        CLI(cfg).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

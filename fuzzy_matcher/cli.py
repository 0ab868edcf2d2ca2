"""
cli.py - command line front end for fuzzy_matcher
Features:
- Loads a word list (one word per line) into a BK-tree
- One-shot queries: fuzzy-matcher words.txt -q colour -q neighbour -t 2
- Interactive loop with /tolerance, /add, /stats and /quit commands
- Uses Rich for tables and formatting
"""

import argparse
import sys
import time
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich.prompt import Prompt
from rich import box
from rich.markup import escape

from fuzzy_matcher.core.bktree import BKTree
from fuzzy_matcher.core.distance import levenshtein
from fuzzy_matcher.loader import load_tree_with_summary
from fuzzy_matcher.utils.config_manager import Config
from fuzzy_matcher.utils.logger_utils import Log, set_logger
from fuzzy_matcher.utils.metrics_tracker import Metrics

console = Console()


class CLI:
    """Holds the tree, config and metrics for one session."""

    def __init__(self, tree: BKTree, cfg: Config, tolerance: Optional[int] = None):
        self.tree = tree
        self.cfg = cfg
        self.tolerance = cfg.get("tolerance") if tolerance is None else tolerance
        self.metrics = Metrics()
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - a plain line is a query
        - lines starting with "/" are commands
        """
        console.rule("[bold magenta]Fuzzy Matcher[/bold magenta]")
        console.print(f"[cyan]{len(self.tree)} words indexed, tolerance {self.tolerance}.[/cyan]")
        console.print("Commands: /tolerance N /add WORD /stats /quit\n")

        while self.running:
            try:
                line = Prompt.ask("[green]Query[/green]", default="")
                if not line:
                    continue
                if line.startswith("/"):
                    self._handle_command(line)
                    continue
                self.query(line)
            except (EOFError, KeyboardInterrupt):
                self.running = False
        console.print("[dim]bye[/dim]")

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str):
        name, _, arg = cmd.partition(" ")
        arg = arg.strip()

        if name == "/quit":
            self.running = False
            return

        if name == "/tolerance":
            try:
                value = int(arg)
            except ValueError:
                value = -1
            if value < 0:
                console.print("[red]Usage:[/red] /tolerance N  (N >= 0)")
                return
            self.tolerance = value
            console.print(f"[cyan]tolerance = {self.tolerance}[/cyan]")
            return

        if name == "/add":
            if not arg:
                console.print("[red]Usage:[/red] /add WORD")
                return
            before = len(self.tree)
            self.tree.insert(arg)
            if len(self.tree) > before:
                console.print(f"[green]Added:[/green] {escape(arg)}")
            else:
                console.print(f"[dim]{escape(arg)} already indexed[/dim]")
            return

        if name == "/stats":
            self._show_stats()
            return

        console.print(f"[red]Unknown command:[/red] {escape(cmd)}")

    # QUERIES ---------------------------------------------------------------------
    def query(self, q: str) -> List[str]:
        t0 = time.perf_counter()
        matches = self.tree.search(q, self.tolerance)
        self.metrics.record("search_time", time.perf_counter() - t0)
        self._display_matches(q, matches)
        return matches

    def _display_matches(self, q: str, matches: List[str]):
        """Matches in traversal order; the distance column is computed for display only."""
        if not matches:
            console.print(f"[dim](no matches for {escape(repr(q))} within {self.tolerance})[/dim]")
            return

        limit = self.cfg.get("max_results")
        table = Table(title=escape(f"{q!r} ~{self.tolerance}"), box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Word", style="bold")
        table.add_column("Dist", justify="right", style="magenta")

        for i, w in enumerate(matches[:limit], 1):
            d = levenshtein(q, w)
            table.add_row(str(i), Text(w, style=self._color_for_distance(d)), str(d))
        console.print(table)
        if len(matches) > limit:
            console.print(f"[dim]... {len(matches) - limit} more[/dim]")

    def _color_for_distance(self, d: int) -> str:
        if d == 0:
            return "green"
        if d == 1:
            return "cyan"
        return "yellow"

    def _show_stats(self):
        lines = [
            f"words:        {len(self.tree)}",
            f"depth:        {self.tree.depth()}",
            f"tolerance:    {self.tolerance}",
            f"searches:     {self.metrics.count('search_time')}",
            f"avg search:   {self.metrics.avg('search_time') * 1000:.3f} ms",
        ]
        console.print(Panel("\n".join(lines), title="Index", border_style="cyan"))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzy-matcher",
        description="Find words within an edit distance of a query using a BK-tree.",
    )
    parser.add_argument("wordlist", help="text file with one word per line")
    parser.add_argument("-q", "--query", action="append", default=[], help="query to run (repeatable); omit for interactive mode")
    parser.add_argument("-t", "--tolerance", type=int, default=None, help="max edit distance (default from config)")
    parser.add_argument("--config", default="fuzzy_matcher.json", help="JSON config file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = Config(args.config)
    log = Log(cfg.get("log_path"), console=cfg.get("console_log"))
    set_logger(log)

    if args.tolerance is not None and args.tolerance < 0:
        console.print("[red]tolerance must be >= 0[/red]")
        return 2

    try:
        tree, summary = load_tree_with_summary(
            args.wordlist,
            encoding=cfg.get("encoding"),
            skip_blank=cfg.get("skip_blank"),
        )
    except OSError as e:
        log.error(f"cannot read {args.wordlist}: {e}")
        console.print(f"[red]Cannot read word list:[/red] {escape(str(e))}")
        return 1

    if summary["skipped"]:
        console.print(f"[yellow]{summary['skipped']} unreadable lines skipped[/yellow]")

    app = CLI(tree, cfg, tolerance=args.tolerance)
    if args.query:
        for q in args.query:
            app.query(q)
        return 0

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
cli.py - command line interface for the anagram generator
Features:
- One-shot mode: `anagrammator liron shapira` prints one anagram per line
- Interactive mode (no phrase given): type phrases, get a table of anagrams
- Slash commands to inspect and change settings (saved to the JSON config)
- Timing of dictionary build and searches written to the log file
- Uses Rich for tables and formatting
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.prompt import Prompt
from rich.markup import escape
from rich.text import Text
from rich import box

from anagrammator.anagrammer import Anagrammer
from anagrammator.utils.config_manager import Config
from anagrammator.utils.logger_utils import Log

logger = logging.getLogger(__name__)

# initialise consoles for rich output (results on stdout, notes/errors on stderr)
console = Console()
err_console = Console(stderr=True)

# cap on rows shown per phrase in interactive mode when no limit is configured
INTERACTIVE_LIMIT = 50

# settings that change the dictionary itself
_REBUILD_KEYS = ("dictionary", "min_word_length")


# ARGUMENTS ------------------------------------------------------------------
def _positive_int(text: str) -> int:
    n = int(text)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def _non_negative_int(text: str) -> int:
    n = int(text)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="anagrammator",
        description="Rearrange the letters of a phrase into dictionary words.",
    )
    parser.add_argument("phrase", nargs="*", help="phrase to anagram (omit for interactive mode)")
    parser.add_argument("-d", "--dictionary", help="newline-delimited word list")
    parser.add_argument("-m", "--min-length", type=_positive_int, help="shortest dictionary word to use")
    parser.add_argument("-n", "--limit", type=_non_negative_int, help="stop after N anagrams (0 = all)")
    parser.add_argument("--sort", action="store_true", default=None, help="sort results (runs the full search first)")
    parser.add_argument("--separator", help="string placed between words")
    parser.add_argument("--config", default="anagrammator.json", help="JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on the console")
    return parser


def _apply_overrides(cfg: Config, args: argparse.Namespace) -> None:
    """CLI flags win over the config file for this run only (not saved)."""
    overrides = {
        "dictionary": args.dictionary,
        "min_word_length": args.min_length,
        "limit": args.limit,
        "sort": args.sort,
        "separator": args.separator,
    }
    for key, val in overrides.items():
        if val is not None:
            cfg.override(key, val)


class CLI:
    """Command-line interface (CLI) class to manage phrases, settings and output."""
    def __init__(self, cfg: Config, log: Log):
        """
        Initialize the CLI:
        - keeps the settings (Config) and file log (Log)
        - the dictionary is built on demand by load()
        """
        self.cfg = cfg
        self.log = log
        self.engine: Optional[Anagrammer] = None
        self.running = True

    # DICTIONARY --------------------------------------------------------------
    def load(self) -> Anagrammer:
        """Build the dictionary trie from the configured word list. OSError/UnicodeDecodeError propagate."""
        path = self.cfg.get("dictionary")
        with self.log.time_block("dictionary build"):
            engine = Anagrammer.from_file(
                path,
                min_length=self.cfg.get("min_word_length"),
                separator=self.cfg.get("separator"),
            )
        self.log.info(f"dictionary {path} loaded (min length {engine.min_length})")
        self.engine = engine
        return engine

    def _results(self, phrase: str, limit: Optional[int]) -> Tuple[List[str], float]:
        """Run one search, return (anagrams, seconds taken)."""
        limit = limit or None  # 0 means no limit
        with self.log.time_block("search") as timer:
            out = list(self.engine.anagrams(phrase, limit=limit, ordered=self.cfg.get("sort")))
        self.log.metric("results", len(out))
        return out, timer.elapsed

    # ONE-SHOT ------------------------------------------------------------------
    def run_once(self, phrase: str) -> int:
        """Print every anagram of `phrase`, one per line."""
        self.log.info(f"phrase: {phrase!r}")
        found = 0
        limit = self.cfg.get("limit") or None
        # stream results as they come unless sorting needs the full set
        for line in self.engine.anagrams(phrase, limit=limit, ordered=self.cfg.get("sort")):
            console.print(line, markup=False, highlight=False, soft_wrap=True)
            found += 1
        self.log.metric("results", found)
        if not found:
            err_console.print("[dim](no anagrams)[/dim]")
        return 0

    # INTERACTIVE LOOP ----------------------------------------------------------
    def run(self) -> int:
        """
        Main interactive loop of CLI:
        - Prompts the user for a phrase.
        - Handles commands like /quit, /config, /set.
        - Shows the anagrams of anything else.
        """
        console.rule("[bold magenta]Anagrammator[/bold magenta]")
        console.print("[cyan]Type a phrase to see its anagrams.[/cyan]")
        console.print("Commands: /help /config /set /stats /quit\n")

        while self.running:
            try:
                line = Prompt.ask("[green]Phrase[/green]", default="").strip()
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            if not line:
                continue
            if line.startswith("/"):
                self._handle_command(line)
                continue
            self._process_phrase(line)
        return 0

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str):
        parts = cmd.split(maxsplit=2)
        name = parts[0].lower()

        if name in ("/q", "/quit", "/exit"):
            self._exit()
            return

        if name == "/help":
            self._show_help()
            return

        if name == "/config":
            self._show_config()
            return

        if name == "/stats":
            self._show_stats()
            return

        if name == "/set":
            if len(parts) < 3:
                console.print("[red]Usage:[/red] /set KEY VALUE")
                return
            self._set_option(parts[1], parts[2])
            return

        console.print(f"[red]Unknown command:[/red] {escape(cmd)}")

    # CORE INPUT PROCESSING ---------------------------------------------------------
    def _process_phrase(self, phrase: str):
        self.log.info(f"phrase: {phrase!r}")
        results, dt = self._results(phrase, self.cfg.get("limit") or INTERACTIVE_LIMIT)

        if not results:
            console.print("[dim](no anagrams)[/dim]")
            return
        self._display_results(results)
        console.print(f"[dim]{len(results)} shown in {dt * 1000:.1f} ms[/dim]")

    # DISPLAY -------------------------------------------------------------------------
    def _display_results(self, results: List[str]):
        table = Table(title="Anagrams", box=box.SIMPLE, show_edge=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Anagram", style="bold")
        for i, text in enumerate(results, 1):
            table.add_row(str(i), Text(text))
        console.print(table)

    def _show_help(self):
        console.print(
            "/config            show current settings\n"
            "/set KEY VALUE     change a setting (saved to the config file)\n"
            "/stats             dictionary statistics\n"
            "/quit              leave"
        )

    def _show_config(self):
        table = Table(title="Settings", box=box.MINIMAL)
        table.add_column("Key", style="cyan")
        table.add_column("Value")
        for k, v in self.cfg.items():
            table.add_row(k, Text(repr(v)))
        console.print(table)

    def _show_stats(self):
        table = Table(title="Dictionary", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Value")
        for k, v in self.engine.stats().items():
            table.add_row(k, Text(repr(v)))
        console.print(table)

    def _set_option(self, key: str, value: str):
        try:
            snap = self.cfg.snapshot(key)
            new = self.cfg.set(key, value)
        except KeyError:
            console.print(f"[red]No such option:[/red] {escape(key)}")
            return
        except ValueError as e:
            console.print(f"[red]Bad value:[/red] {escape(str(e))}")
            return

        if key == "separator" and self.engine is not None:
            self.engine.separator = new
        elif key in _REBUILD_KEYS:
            try:
                self.load()
            except (OSError, UnicodeDecodeError) as e:
                # keep the working dictionary and put the old value back
                self.cfg.restore(key, snap)
                console.print(f"[red]Could not load dictionary:[/red] {escape(str(e))}")
                return
        console.print(f"[green]{key}[/green] = {escape(repr(new))}")

    # EXIT ------------------------------------------------------------------------
    def _exit(self):
        console.rule("[red]Exiting[/red]")
        self.running = False


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s: %(message)s")

    cfg = Config(args.config)
    _apply_overrides(cfg, args)
    cli = CLI(cfg, Log(echo=args.verbose))

    try:
        cli.load()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("dictionary load failed", exc_info=True)
        err_console.print(f"[red]Could not load dictionary:[/red] {escape(str(e))}")
        return 1

    if args.phrase:
        return cli.run_once(" ".join(args.phrase))
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())

"""
cli.py - command line front end for the suggestion builder
Features:
- One-shot mode: suggestions for text given as arguments or read from a file
- Interactive mode: type sentences, tweak stop-words/window/keyword live
- Settings from a JSON config, overridable by flags
- Uses Rich for tables and formatting
"""

import argparse
import logging
import shlex
from typing import List, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from rich import box

from suggestion_builder.context.tokenizer import simple_tokenize, tokenize_lines
from suggestion_builder.core.suggestion import InvalidArgumentError, build
from suggestion_builder.utils.config_manager import Config, ConfigError
from suggestion_builder.utils.logger_utils import Log, setup_logging

logger = logging.getLogger(__name__)

# initialise console for rich output
console = Console()

EXIT_OK = 0
EXIT_ERROR = 2

HELP = (
    "Commands: /keyword [word]  /stop a,b,c  /window <n>  /minlen <n>\n"
    "          /config  /save  /help  /quit"
)


def generate(tokens: List[str], cfg: Config) -> List[str]:
    """Build a generator from cfg and run it over tokens, keyword-filtered if set."""
    gen = build(tokens, **cfg.as_build_kwargs())
    keyword = cfg.get("keyword")
    with Log.time_block("suggest"):
        if keyword:
            return gen.suggest_by_keyword(keyword)
        return gen.suggest()


def display_suggestions(suggestions: List[str], out: Optional[Console] = None, keyword: str = ""):
    """Print suggestions as a numbered table."""
    out = out or console
    if not suggestions:
        out.print("[dim](no suggestions)[/dim]")
        return
    title = f"Suggestions for '{escape(keyword)}'" if keyword else "Suggestions"
    table = Table(title=title, box=box.SIMPLE, show_edge=False)
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Suggestion", style="bold")
    table.add_column("Words", justify="right", style="dim")
    for i, s in enumerate(suggestions, 1):
        table.add_row(str(i), Text(s), str(len(s.split())))
    out.print(table)


class SuggestionShell:
    """
    Interactive loop: plain lines are tokenized and suggested,
    lines starting with / are commands.
    """

    def __init__(self, cfg: Config, out: Optional[Console] = None, stream: Optional[TextIO] = None):
        self.cfg = cfg
        self.console = out or console
        # stream is for feeding input from a file/StringIO instead of stdin
        self.stream = stream
        self.running = True

    def run(self):
        self.console.rule("[bold magenta]Suggestion Builder[/bold magenta]")
        self.console.print("[cyan]Type a sentence to get phrase suggestions.[/cyan]")
        self.console.print(HELP + "\n")

        while self.running:
            try:
                line = self._read()
            except (EOFError, KeyboardInterrupt):
                self._exit()
                break
            if not line:
                continue
            if line.startswith("/"):
                self.handle_command(line)
                continue
            self.process_input(line)

    def _read(self) -> str:
        line = self.console.input("[green]text[/green] > ", stream=self.stream)
        # readline() gives "" only at end of stream
        if self.stream is not None and line == "":
            raise EOFError
        return line.strip()

    # COMMAND HANDLING -----------------------------------------------------------
    def handle_command(self, cmd: str):
        try:
            parts = shlex.split(cmd)
        except ValueError as e:
            self.console.print(f"[red]Bad command:[/red] {escape(str(e))}")
            return
        name, args = parts[0].lower(), parts[1:]

        if name in ("/q", "/quit", "/exit"):
            self._exit()
            return

        if name == "/help":
            self.console.print(HELP)
            return

        if name == "/config":
            self.cfg.show(self.console)
            return

        if name == "/save":
            self._save()
            return

        option = {
            "/keyword": "keyword",
            "/stop": "stop_words",
            "/window": "max_combined_words",
            "/minlen": "max_word_to_ignore_length",
        }.get(name)
        if option is None:
            self.console.print(f"[red]Unknown command:[/red] {escape(name)}")
            return

        value = " ".join(args)
        if not value and option not in ("keyword", "stop_words"):
            self.console.print(f"[red]usage:[/red] {name} <n>")
            return
        try:
            self.cfg.set(option, value)
        except ConfigError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return
        self.console.print(f"[dim]{option} = {escape(repr(self.cfg.get(option)))}[/dim]")

    # CORE INPUT PROCESSING -----------------------------------------------------
    def process_input(self, text: str):
        tokens = simple_tokenize(text)
        try:
            suggestions = generate(tokens, self.cfg)
        except InvalidArgumentError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return
        display_suggestions(suggestions, self.console, self.cfg.get("keyword"))

    def _save(self):
        if not self.cfg.path:
            self.console.print("[yellow]No config file given (use --config).[/yellow]")
            return
        try:
            self.cfg.save()
        except OSError as e:
            logger.error("saving config failed: %s", e)
            self.console.print(f"[red]Save failed:[/red] {escape(str(e))}")
            return
        self.console.print("[green]Config saved.[/green]")

    def _exit(self):
        self.console.rule("[red]Exiting[/red]")
        self.running = False


# ARGUMENTS -----------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="suggestion-builder",
        description="Generate word-phrase suggestions from text.",
    )
    parser.add_argument("text", nargs="*", help="text to build suggestions from")
    parser.add_argument("-f", "--file", help="read text from a file instead")
    parser.add_argument("-k", "--keyword", help="only keep suggestions containing this")
    parser.add_argument("-s", "--stop-words", help="comma-separated stop-words")
    parser.add_argument("-w", "--max-combined-words", type=int, help="max words per suggestion")
    parser.add_argument("-m", "--max-word-length", type=int, dest="max_word_to_ignore_length",
                        help="ignore words of this length or shorter")
    parser.add_argument("-c", "--config", help="JSON config file")
    parser.add_argument("-i", "--interactive", action="store_true", help="start the interactive shell")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--log-file", help="also write logs to this file")
    return parser


def apply_args(cfg: Config, args: argparse.Namespace) -> Config:
    """Flags given on the command line win over the config file."""
    overrides = {
        "keyword": args.keyword,
        "stop_words": args.stop_words,
        "max_combined_words": args.max_combined_words,
        "max_word_to_ignore_length": args.max_word_to_ignore_length,
    }
    for key, val in overrides.items():
        if val is not None:
            cfg.set(key, val)
    return cfg


def read_tokens(args: argparse.Namespace) -> List[str]:
    if args.file:
        with open(args.file, "r", encoding="utf8") as f:
            return tokenize_lines(f)
    return simple_tokenize(" ".join(args.text))


def main(argv: Optional[List[str]] = None, stream: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING", log_file=args.log_file)

    try:
        cfg = apply_args(Config(args.config), args)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        return EXIT_ERROR

    if args.text or args.file:
        try:
            tokens = read_tokens(args)
            suggestions = generate(tokens, cfg)
        except (OSError, UnicodeDecodeError, InvalidArgumentError) as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            return EXIT_ERROR
        logger.debug("%d tokens -> %d suggestions", len(tokens), len(suggestions))
        display_suggestions(suggestions, keyword=cfg.get("keyword"))
        if not args.interactive:
            return EXIT_OK

    SuggestionShell(cfg, stream=stream).run()
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())

"""CLI for passforge — generate passwords, score them, manage default settings."""

import argparse
import logging
import random
import sys

from rich import get_console, print
from rich.logging import RichHandler
from rich.table import Table
from rich.markup import escape
from rich.text import Text

from .charsets import parse_classes, select_classes, canonical_order, CharacterClass
from .config import load_config, save_config, config_path
from .errors import PassforgeError
from .generator import generate_many
from .scorer import score, strength_bars, character_variety

logger = logging.getLogger("passforge")

BAR_CHAR = "█" * 3

def _setup_logging(level: str) -> None:
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(show_path=False))
    logger.setLevel(level)

def _bars(tier) -> Text:
    text = Text()
    for color in strength_bars(tier):
        text.append(BAR_CHAR + " ", style=color)
    return text

def cmd_generate(args, cfg):
    length = args.length if args.length is not None else cfg["default_length"]
    defaults = parse_classes(cfg["default_classes"])
    classes = select_classes(
        upper=CharacterClass.UPPERCASE in defaults and not args.no_upper,
        lower=CharacterClass.LOWERCASE in defaults and not args.no_lower,
        digits=CharacterClass.NUMBER in defaults and not args.no_digits,
        symbols=CharacterClass.SYMBOL in defaults and not args.no_symbols,
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    for i, pw in enumerate(generate_many(args.copies, length, classes, rng)):
        line = f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}"
        if args.show_strength:
            line += f"  [dim]({score(pw).label})[/dim]"
        # keep each password on one line regardless of terminal width
        get_console().print(line, soft_wrap=True)

def cmd_score(args, cfg):
    pw = args.password
    tier = score(pw)
    print(f"[bold]Strength:[/bold] [{tier.color}]{tier.label.upper()}[/{tier.color}] ({tier.rank}/4)")
    print(_bars(tier))
    print(f"Length: {len(pw)}  Character types: {character_variety(pw)}/4")

def cmd_config_show(args, cfg):
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("default_length", str(cfg["default_length"]))
    table.add_row("default_classes", ", ".join(cfg["default_classes"]))
    table.add_row("log_level", str(cfg["log_level"]))
    print(table)
    print(f"[dim]{config_path()}[/dim]")

def cmd_config_set(args, cfg):
    new = dict(cfg)
    if args.length is not None:
        new["default_length"] = args.length
    if args.classes is not None:
        new["default_classes"] = [c.value for c in canonical_order(parse_classes(args.classes))]
    if args.log_level is not None:
        new["log_level"] = args.log_level.upper()
    path = save_config(new)
    print(f"[green]Saved settings to:[/green] {path}")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passforge")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=None, help="Password length (default from settings)")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.add_argument("--seed", type=int, default=None, help="Seed for reproducible (insecure) output")
    gen.add_argument("--show-strength", action="store_true", help="Print the strength rating next to each password")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Rate the strength of a password")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.set_defaults(func=cmd_score)

    c = sub.add_parser("config", help="Show or change default settings")
    csub = c.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Print the effective settings")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Change and save settings")
    c_set.add_argument("--length", type=int, help="Default password length")
    c_set.add_argument("--classes", type=str, help="Comma separated classes, e.g. upper,lower,number,symbol")
    c_set.add_argument("--log-level", type=str, help="Log level (DEBUG, INFO, WARNING, ...)")
    c_set.set_defaults(func=cmd_config_set)

    return parser

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config()
    _setup_logging("DEBUG" if args.verbose else cfg["log_level"])
    try:
        args.func(args, cfg)
    except PassforgeError as e:
        logger.debug("command failed", exc_info=True)
        print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())

"""
Command-line interface.

Usage:
    pwdgen -l 20 -v
    pwdgen -m passphrase -l 6 --separator _
    pwdgen -p enterprise -n 5 --json
    pwdgen -i
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from rich.console import Console
from rich.text import Text

from . import __version__
from .clipboard import ClipboardError, copy_to_clipboard
from .config import PRESETS, ConfigError, Mode, PasswordOptions
from .generator import PasswordGenerator
from .guard import check_pwned
from .interactive import STRENGTH_STYLES, run_interactive
from .wordlist import load_wordlist

logger = logging.getLogger(__name__)

MIN_COUNT = 1
MAX_COUNT = 100

EXIT_SUCCESS = 0
EXIT_ERROR = 1


class _ArgumentParser(argparse.ArgumentParser):
    """Reports argument errors with the same exit code as other failures."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(EXIT_ERROR, f"Error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="pwdgen",
        description="Generate cryptographically secure passwords",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"Presets: {', '.join(PRESETS)}",
    )
    parser.add_argument("--version", "-V", action="version",
                        version=f"%(prog)s {__version__}")

    # Unset generation options stay None so presets and mode defaults apply.
    parser.add_argument("-l", "--length", type=int,
                        help="length of the password (words in passphrase mode)")
    parser.add_argument("-m", "--mode", choices=[m.value for m in Mode],
                        help="generation mode (default: random)")
    parser.add_argument("-s", "--no-special", dest="special", action="store_false",
                        default=None, help="exclude special characters")
    parser.add_argument("-c", "--charset", help="use a custom character set")
    parser.add_argument("-n", "--count", type=int, default=1,
                        help="number of passwords to generate (1-100)")
    parser.add_argument("-e", "--exclude-similar", action="store_true", default=None,
                        help="exclude similar-looking characters")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="show security metrics (entropy and strength)")
    parser.add_argument("-j", "--json", action="store_true",
                        help="output in JSON format")
    parser.add_argument("-y", "--copy", action="store_true",
                        help="copy the (first) generated password to clipboard")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="run in interactive mode")
    parser.add_argument("--check", action="store_true",
                        help="check if the generated password has been pwned (HIBP)")
    parser.add_argument("--min-lower", type=int, help="minimum lowercase characters")
    parser.add_argument("--min-upper", type=int, help="minimum uppercase characters")
    parser.add_argument("--min-digit", type=int, help="minimum digit characters")
    parser.add_argument("--min-special", type=int, help="minimum special characters")
    parser.add_argument("--separator", help="passphrase separator (default: -)")
    parser.add_argument("--wordlist", metavar="PATH",
                        help="path to a custom wordlist file")
    parser.add_argument("-p", "--preset",
                        help=f"use a security preset ({', '.join(PRESETS)})")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def read_wordlist_file(path: str) -> list[str]:
    """
    Load a --wordlist file, reporting unusable files as ConfigError.
    """
    try:
        words = load_wordlist(path)
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Wordlist file {path} is not valid UTF-8: {exc.reason}") from exc
    if not words:
        raise ConfigError(f"Wordlist file {path} contains no words.")
    return words


def options_from_args(args: argparse.Namespace) -> PasswordOptions:
    wordlist = read_wordlist_file(args.wordlist) if args.wordlist else None
    return PasswordOptions(
        mode=args.mode,
        length=args.length,
        is_special=args.special,
        custom_charset=args.charset,
        exclude_similar=args.exclude_similar,
        min_lower=args.min_lower,
        min_upper=args.min_upper,
        min_digit=args.min_digit,
        min_special=args.min_special,
        separator=args.separator,
        wordlist=wordlist,
        preset=args.preset,
    )


def _format_line(result: dict, check: bool, verbose: bool) -> Text:
    line = Text(result["password"])
    if check:
        if result["pwned_count"] > 0:
            line.append(" [")
            line.append(f"PWNED: {result['pwned_count']} times", style="red")
            line.append("]")
        else:
            line.append(" [")
            line.append("SAFE", style="green")
            line.append("]")
    if verbose:
        strength = result["strength"]
        line.append(f" [{result['entropy']} bits, ")
        line.append(strength.value, style=STRENGTH_STYLES[strength])
        line.append("]")
    return line


def run(args: argparse.Namespace, console: Console) -> int:
    if not MIN_COUNT <= args.count <= MAX_COUNT:
        raise ConfigError(
            f"Count must be a number between {MIN_COUNT} and {MAX_COUNT}."
        )

    generator = PasswordGenerator(options_from_args(args))

    results = []
    for _ in range(args.count):
        result = generator.generate_full()
        pwned_count = check_pwned(result.password) if args.check else 0
        results.append({
            "password": result.password,
            "entropy": result.entropy,
            "strength": result.strength,
            "pwned_count": pwned_count,
        })

    if args.copy:
        copy_to_clipboard(results[0]["password"])

    if args.json:
        payload = [dict(r, strength=r["strength"].value) for r in results]
        print(json.dumps(payload[0] if args.count == 1 else payload, indent=2))
        return EXIT_SUCCESS

    for result in results:
        console.print(_format_line(result, args.check, args.verbose), soft_wrap=True)
    if args.copy:
        console.print("(First password copied to clipboard!)", style="green")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Entry point for the `pwdgen` script and `python -m pwdgen`.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    console = Console(highlight=False)

    if args.interactive:
        return run_interactive(console)

    try:
        return run(args, console)
    except (ConfigError, ClipboardError, OSError) as exc:
        logger.debug("Generation failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

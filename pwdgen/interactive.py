"""
Interactive wizard: asks a few questions, generates one secret, checks it
against known breaches and offers to copy it.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.text import Text

from .clipboard import ClipboardError, copy_to_clipboard
from .config import (
    MAX_LENGTH,
    MAX_WORDS,
    MIN_LENGTH,
    MIN_WORDS,
    DEFAULT_WORDS,
    Mode,
    PasswordOptions,
)
from .entropy import Strength
from .generator import generate_full
from .guard import check_pwned

logger = logging.getLogger(__name__)

DEFAULT_INTERACTIVE_LENGTH = 16

STRENGTH_STYLES = {
    Strength.VERY_STRONG: "green",
    Strength.STRONG: "cyan",
    Strength.MEDIUM: "yellow",
    Strength.WEAK: "red",
}


def _ask_int(console: Console, message: str, low: int, high: int, default: int) -> int:
    """Keep asking until the answer falls in [low, high]."""
    while True:
        value = IntPrompt.ask(message, default=default, console=console)
        if low <= value <= high:
            return value
        console.print(f"[red]Must be between {low} and {high}[/red]")


def _ask_options(console: Console) -> PasswordOptions:
    mode = Prompt.ask(
        "Select generation mode",
        choices=[Mode.RANDOM.value, Mode.PASSPHRASE.value],
        default=Mode.RANDOM.value,
        console=console,
    )

    if mode == Mode.RANDOM.value:
        length = _ask_int(
            console, "Password length", MIN_LENGTH, MAX_LENGTH,
            DEFAULT_INTERACTIVE_LENGTH,
        )
        is_special = Confirm.ask(
            "Include special characters?", default=True, console=console
        )
        return PasswordOptions(mode=Mode.RANDOM, length=length, is_special=is_special)

    words = _ask_int(console, "Number of words", MIN_WORDS, MAX_WORDS, DEFAULT_WORDS)
    return PasswordOptions(mode=Mode.PASSPHRASE, length=words)


def run_interactive(console: Console | None = None) -> int:
    """
    Run the wizard. Returns the process exit code.

    Ctrl-C or end of input cancels quietly.
    """
    console = console or Console(highlight=False)
    console.print("[cyan]Password Generator - Interactive Mode[/cyan]")

    try:
        options = _ask_options(console)
        result = generate_full(options)

        pwned = check_pwned(result.password)
        if pwned > 0:
            status = Text(f"PWNED {pwned} times!", style="red")
        else:
            status = Text("Safe (not in leaks)", style="green")

        body = Text(result.password)
        body.append("\n\nStrength: ")
        body.append(result.strength.value, style=STRENGTH_STYLES[result.strength])
        body.append(f" ({result.entropy} bits)")
        body.append("\nStatus: ")
        body.append(status)
        console.print(Panel(body, title="Generated Password"))

        if Confirm.ask("Copy to clipboard?", default=True, console=console):
            try:
                copy_to_clipboard(result.password)
            except ClipboardError as exc:
                console.print(f"[red]Error:[/red] {exc}")
                return 1
            console.print("[green]Copied and finished![/green]")
        else:
            console.print("Finished!")
    except (KeyboardInterrupt, EOFError):
        logger.debug("Interactive session cancelled")
        console.print()
        return 0

    return 0

"""Rich formatting helpers for the numprompt CLI.

Everything here writes to stderr so that stdout carries only the prompt
and its replies. Rich degrades to plain text when stderr is not a TTY.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from numprompt.models.outcome import PromptResult


def get_console() -> Console:
    """Create a Rich Console bound to stderr."""
    return Console(stderr=True)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)


def format_summary(result: PromptResult, console: Console) -> None:
    """Display how many attempts it took to get an accepted value."""
    rejected = len(result.history) if result.history else 0
    console.print(
        f"[dim]Accepted [green]{result.value:g}[/green] after "
        f"{result.attempts} attempt(s), {rejected} rejected.[/dim]",
        highlight=False,
    )

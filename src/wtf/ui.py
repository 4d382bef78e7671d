"""Terminal rendering and prompts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Sequence

    from wtf.matching.models import Suggestion, TypoEntry

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

CONFIDENCE_STYLES = {
    "custom": "magenta",
    "exact": "green",
    "fuzzy": "yellow",
}


def display_suggestions(last_cmd: str, suggestions: Sequence[Suggestion]) -> None:
    console.print("[bright_red]Previous command:[/bright_red]")
    console.print(f"  [bright_yellow]{escape(last_cmd)}[/bright_yellow]")
    console.print()

    for i, suggestion in enumerate(suggestions, 1):
        style = CONFIDENCE_STYLES.get(suggestion.confidence.value, "white")
        console.print(
            f"[bright_cyan]\\[{i}][/bright_cyan] "
            f"[{style}]Suggested fix:[/{style}] "
            f"[bold bright_white]{escape(suggestion.command)}[/bold bright_white] "
            f"[dim]({escape(suggestion.explanation)})[/dim]"
        )
    console.print()


def display_no_suggestions(last_cmd: str) -> None:
    console.print(
        f"[bright_yellow]¯\\_(ツ)_/¯[/bright_yellow] No suggestions found for: "
        f"[bright_white]{escape(last_cmd)}[/bright_white]"
    )
    console.print("[dim]The command might be correct or too complex to fix automatically.[/dim]")
    console.print()
    console.print("[bright_cyan]Tip: Add your own fix with:[/bright_cyan]")
    console.print(f'  wtf add "{escape(last_cmd)}" "<correct_command>"')


def prompt_selection(max_choice: int) -> int | None:
    """Ask which suggestion to run.

    Args:
        max_choice: Number of suggestions shown

    Returns:
        Zero-based index, or None when cancelled. Enter picks the first one.
    """
    try:
        answer = console.input(
            f"[bright_cyan]Select a fix[/bright_cyan] \\[1-{max_choice}] (or 'n' to cancel): "
        )
    except EOFError:
        return None

    answer = answer.strip().lower()
    if answer in ("n", "no"):
        return None

    if answer.isdigit():
        number = int(answer)
        if 0 < number <= max_choice:
            return number - 1
        return None

    if not answer and max_choice > 0:
        return 0

    return None


def confirm_run(command: str) -> bool:
    """Ask before running a single command. Enter means yes."""
    console.print(f"[bright_cyan]AI suggestion:[/bright_cyan] [bold]{escape(command)}[/bold]")
    try:
        answer = console.input("[bright_cyan]Run this command?[/bright_cyan] \\[Y/n]: ")
    except EOFError:
        return False
    return answer.strip().lower() in ("", "y", "yes")


def display_custom_typos(typos: Sequence[TypoEntry]) -> None:
    if not typos:
        console.print("[yellow]No custom typos configured.[/yellow]")
        console.print()
        console.print("[dim]Add one with:[/dim]")
        console.print('  wtf add "wrong_cmd" "correct_cmd"')
        return

    table = Table(title="Custom Typos")
    table.add_column("#", style="bright_black")
    table.add_column("Wrong", style="bright_yellow")
    table.add_column("Correct", style="bright_green")

    for i, entry in enumerate(typos, 1):
        table.add_row(str(i), escape(entry.wrong), escape(entry.correct))

    console.print(table)
    console.print(f"{len(typos)} custom typo(s)")


def display_added(wrong: str, correct: str) -> None:
    console.print(
        f"[bright_green]✓ Added:[/bright_green] [bright_yellow]{escape(wrong)}[/bright_yellow] "
        f"→ {escape(correct)}"
    )


def display_removed(wrong: str) -> None:
    console.print(f"[bright_green]✓ Removed:[/bright_green] [bright_yellow]{escape(wrong)}[/bright_yellow]")


def display_success(command: str) -> None:
    console.print(f"[bold bright_green]Running:[/bold bright_green] {escape(command)}")
    console.print()


def display_error(message: str) -> None:
    err_console.print(f"[bright_red]Error:[/bright_red] {escape(message)}")


def display_info(message: str) -> None:
    console.print(f"[bright_cyan]{escape(message)}[/bright_cyan]")


def display_api_key_help() -> None:
    err_console.print("[bright_red]Google API key not found![/bright_red]")
    err_console.print()
    err_console.print("[bright_yellow]To use AI-powered fixing, you need a Google AI API key:[/bright_yellow]")
    err_console.print()
    err_console.print("[bright_cyan]Option 1: Set environment variable[/bright_cyan]")
    err_console.print('  export GOOGLE_API_KEY="your-key-here"')
    err_console.print()
    err_console.print("[bright_cyan]Option 2: Save to config[/bright_cyan]")
    err_console.print("  wtf set-api-key your-key-here")
    err_console.print()
    err_console.print("[bright_cyan]Get your API key from:[/bright_cyan]")
    err_console.print("  https://aistudio.google.com/app/apikey")

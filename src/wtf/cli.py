"""Command-line interface for wtf."""

from __future__ import annotations

import logging
import sys

import click
from thefuzz import fuzz, process

from wtf import __version__, ui
from wtf.ai import AIFixError, GeminiClient, resolve_api_key
from wtf.config import ConfigError, ConfigStore
from wtf.core import TypoFixer
from wtf.executor import ExecutionError, execute_command
from wtf.history import HistoryError, configure_bash_history, needs_bash_history_setup

logger = logging.getLogger(__name__)


class AliasedGroup(click.Group):
    """Group that also accepts the short subcommand aliases."""

    ALIASES = {
        "a": "add",
        "rm": "remove",
        "ls": "list",
        "cls": "clear",
        "cfg": "config",
        "s": "save",
        "am": "auto-mode",
        "ta": "toggle-auto",
        "aim": "ai-mode",
        "tai": "toggle-ai",
        "ch": "config-history",
    }

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.ALIASES.get(cmd_name, cmd_name))

    def resolve_command(
        self,
        ctx: click.Context,
        args: list[str],
    ) -> tuple[str | None, click.Command | None, list[str]]:
        # Report the canonical name, not the alias
        _, cmd, args = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, args


def _save(fixer: TypoFixer) -> None:
    try:
        fixer.save()
    except ConfigError as e:
        ui.display_error(f"Failed to save config: {e}")
        sys.exit(1)


@click.group(cls=AliasedGroup, invoke_without_command=True)
@click.option("--config", "-c", "config_path", type=click.Path(dir_okay=False), help="Configuration file path")
@click.option("--yes", "-y", is_flag=True, help="Run the first suggestion without confirmation")
@click.option("--debug", "-d", is_flag=True, help="Show debug information")
@click.option("--ai", "use_ai", is_flag=True, help="Use AI to fix the command (requires a Google Gemini API key)")
@click.version_option(__version__, prog_name="wtf")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: str | None,
    yes: bool,
    debug: bool,
    use_ai: bool,
) -> None:
    """Fix typos in your previous command."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    fixer = TypoFixer(store=ConfigStore(config_path))
    ctx.ensure_object(dict)
    ctx.obj["fixer"] = fixer
    ctx.obj["debug"] = debug

    if ctx.invoked_subcommand is not None:
        return

    if not fixer.config.first_run_complete:
        _first_run(fixer)

    auto_yes = yes or fixer.config.auto_mode
    if use_ai or fixer.config.ai_mode:
        _ai_fix(fixer, auto_yes, debug)
    else:
        _fix(fixer, auto_yes, debug)


def _first_run(fixer: TypoFixer) -> None:
    ui.console.print()
    ui.console.print("[bold bright_cyan]Welcome to wtf - command typo fixer![/bold bright_cyan]")
    ui.console.print("Run 'wtf' right after a mistyped command to fix it.")
    ui.console.print()

    if needs_bash_history_setup():
        ui.console.print("[yellow]Bash only writes history on exit by default.[/yellow]")
        ui.console.print("Run 'wtf config-history' so wtf can see your last command.")
        ui.console.print()

    fixer.config.mark_first_run_complete()
    try:
        fixer.save()
    except ConfigError as e:
        logger.warning(f"Failed to save config: {e}")


def _previous_command(fixer: TypoFixer, debug: bool) -> str:
    try:
        last_cmd = fixer.previous_command()
    except HistoryError as e:
        ui.display_error(str(e))
        sys.exit(1)

    if debug:
        ui.console.print(f"Last command: {last_cmd}", markup=False)
    return last_cmd


def _run(command: str) -> None:
    ui.display_success(command)
    try:
        execute_command(command)
    except ExecutionError as e:
        ui.display_error(str(e))
        sys.exit(1)


def _fix(fixer: TypoFixer, auto_yes: bool, debug: bool, last_cmd: str | None = None) -> None:
    if last_cmd is None:
        last_cmd = _previous_command(fixer, debug)

    suggestions = fixer.suggest(last_cmd)
    if not suggestions:
        ui.display_no_suggestions(last_cmd)
        return

    ui.display_suggestions(last_cmd, suggestions)

    if auto_yes:
        selected = 0
    else:
        selected = ui.prompt_selection(len(suggestions))
        if selected is None:
            ui.console.print("[yellow]Cancelled.[/yellow]")
            return

    _run(suggestions[selected].command)


def _ai_fix(fixer: TypoFixer, auto_yes: bool, debug: bool) -> None:
    try:
        api_key = resolve_api_key(fixer.config)
    except AIFixError:
        ui.display_api_key_help()
        sys.exit(1)

    last_cmd = _previous_command(fixer, debug)

    try:
        with ui.console.status("[bold bright_cyan]Asking Google Gemini to fix the command..."):
            fixed = fixer.ai_fix(last_cmd, GeminiClient(api_key))
    except AIFixError as e:
        ui.display_error(f"AI fix failed: {e}")
        ui.console.print("[yellow]Falling back to built-in typo detection...[/yellow]")
        ui.console.print()
        _fix(fixer, auto_yes, debug, last_cmd)
        return

    if not auto_yes and not ui.confirm_run(fixed):
        ui.console.print("[yellow]Cancelled.[/yellow]")
        return

    _run(fixed)


@cli.command()
@click.argument("wrong")
@click.argument("correct")
@click.pass_context
def add(ctx: click.Context, wrong: str, correct: str) -> None:
    """Add a custom typo fix (alias: a)."""
    fixer: TypoFixer = ctx.obj["fixer"]
    try:
        builtin = fixer.add_custom(wrong, correct)
    except ConfigError as e:
        ui.display_error(f"Failed to save config: {e}")
        sys.exit(1)

    if builtin:
        ui.display_info("This typo is already in the built-in database, adding to your custom list.")
    ui.display_added(wrong, correct)


@cli.command()
@click.argument("wrong")
@click.pass_context
def remove(ctx: click.Context, wrong: str) -> None:
    """Remove a custom typo fix (alias: rm)."""
    fixer: TypoFixer = ctx.obj["fixer"]
    try:
        removed = fixer.remove_custom(wrong)
    except ConfigError as e:
        ui.display_error(f"Failed to save config: {e}")
        sys.exit(1)

    if removed:
        ui.display_removed(wrong)
        return

    ui.display_error(f"Typo '{wrong}' not found in custom list")
    known = [entry.wrong for entry in fixer.config.custom_typos]
    if known:
        matches = process.extract(wrong, known, scorer=fuzz.ratio, limit=3)
        close = [match for match, score in matches if score >= 60]
        if close:
            ui.display_info(f"Did you mean: {', '.join(close)}")
    sys.exit(1)


@cli.command(name="list")
@click.pass_context
def list_typos(ctx: click.Context) -> None:
    """List all custom typos (alias: ls)."""
    fixer: TypoFixer = ctx.obj["fixer"]
    ui.display_custom_typos(fixer.config.custom_typos)


@cli.command()
@click.pass_context
def clear(ctx: click.Context) -> None:
    """Clear all custom typos (alias: cls)."""
    fixer: TypoFixer = ctx.obj["fixer"]
    count = fixer.config.clear_typos()
    _save(fixer)
    ui.console.print(f"[bright_green]✓[/bright_green] Cleared {count} custom typo(s)")


@cli.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show config file location (alias: cfg)."""
    fixer: TypoFixer = ctx.obj["fixer"]
    ui.console.print("[bright_cyan]Config file location:[/bright_cyan]")
    ui.console.print(f"  {fixer.store.path}", markup=False)


@cli.command()
@click.argument("correct")
@click.pass_context
def save(ctx: click.Context, correct: str) -> None:
    """Add the wrong command from history to custom fixes (alias: s)."""
    fixer: TypoFixer = ctx.obj["fixer"]
    try:
        wrong = fixer.save_previous_as(correct)
    except (HistoryError, ConfigError) as e:
        ui.display_error(str(e))
        sys.exit(1)

    ui.display_added(wrong, correct)
    ui.console.print()
    ui.display_info("Now you can use 'wtf' to fix this typo in the future!")


@cli.command(name="set-api-key")
@click.argument("api_key")
@click.pass_context
def set_api_key(ctx: click.Context, api_key: str) -> None:
    """Set Google AI API key for AI-powered fixing."""
    fixer: TypoFixer = ctx.obj["fixer"]
    fixer.config.set_google_api_key(api_key)
    _save(fixer)

    ui.console.print("[bright_green]✓ Google AI API key saved successfully![/bright_green]")
    ui.console.print()
    ui.display_info("You can now use AI-powered fixing with:")
    ui.console.print("  wtf --ai")


@cli.command(name="auto-mode")
@click.argument("enabled", type=click.BOOL)
@click.pass_context
def auto_mode(ctx: click.Context, enabled: bool) -> None:
    """Enable or disable auto-mode (auto-run first suggestion) (alias: am)."""
    fixer: TypoFixer = ctx.obj["fixer"]
    fixer.config.set_auto_mode(enabled)
    _save(fixer)
    _report_auto_mode(enabled)


@cli.command(name="toggle-auto")
@click.pass_context
def toggle_auto(ctx: click.Context) -> None:
    """Toggle auto-mode on/off (alias: ta)."""
    fixer: TypoFixer = ctx.obj["fixer"]
    enabled = fixer.config.toggle_auto_mode()
    _save(fixer)
    _report_auto_mode(enabled)


def _report_auto_mode(enabled: bool) -> None:
    if enabled:
        ui.console.print("[bright_green]✓ Auto-mode enabled![/bright_green]")
        ui.display_info("wtf will now automatically run the first suggestion without prompting.")
    else:
        ui.console.print("[bright_green]✓ Auto-mode disabled![/bright_green]")
        ui.display_info("wtf will now prompt before running suggestions.")


@cli.command(name="ai-mode")
@click.argument("enabled", type=click.BOOL)
@click.pass_context
def ai_mode(ctx: click.Context, enabled: bool) -> None:
    """Enable or disable AI mode (always use --ai) (alias: aim)."""
    fixer: TypoFixer = ctx.obj["fixer"]
    fixer.config.set_ai_mode(enabled)
    _save(fixer)
    _report_ai_mode(enabled)


@cli.command(name="toggle-ai")
@click.pass_context
def toggle_ai(ctx: click.Context) -> None:
    """Toggle AI mode on/off (alias: tai)."""
    fixer: TypoFixer = ctx.obj["fixer"]
    enabled = fixer.config.toggle_ai_mode()
    _save(fixer)
    _report_ai_mode(enabled)


def _report_ai_mode(enabled: bool) -> None:
    if enabled:
        ui.console.print("[bright_green]✓ AI mode enabled![/bright_green]")
        ui.display_info("wtf will now use Google Gemini for command fixing.")
    else:
        ui.console.print("[bright_green]✓ AI mode disabled![/bright_green]")
        ui.display_info("wtf will now use pattern matching for command fixing.")


@cli.command(name="config-history")
def config_history() -> None:
    """Configure bash history for real-time updates (alias: ch)."""
    if sys.platform == "win32":
        ui.console.print("[yellow]This command is only available on Linux/Unix systems.[/yellow]")
        return

    if not needs_bash_history_setup():
        ui.display_info("Nothing to do: bash history is already written after each command.")
        return

    try:
        bashrc = configure_bash_history()
    except HistoryError as e:
        ui.display_error(str(e))
        sys.exit(1)

    ui.console.print(f"[bright_green]✓ Updated {bashrc}[/bright_green]")
    ui.display_info("Restart your shell or run 'source ~/.bashrc' to apply.")


def main() -> None:
    """Entry point."""
    cli()


if __name__ == "__main__":
    main()

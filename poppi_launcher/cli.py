"""
Poppi Launcher command line interface.

Usage:
    poppi query <text> [--json] [--all]
    poppi run <text> [--index N]
    poppi windows [--json]
    poppi terminal
    poppi config show|path|init

The CLI drives the same session a graphical front end uses, which makes
it handy for key bindings (``poppi run "sw firefox"``) and for checking
which backends work on the current desktop.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import ConfigStore
from .errors import TerminalNotFoundError, WindowEnumerationError
from .logging_config import setup_logging
from .models.candidates import Candidate, candidate_to_dict
from .models.config import LauncherConfig
from .services.process import CommandRunner
from .services.terminal_launcher import TerminalLauncher, TerminalLocator
from .services.window_switcher import WindowEnumerator, build_default_tiers
from .session import LauncherSession


console = Console()
err_console = Console(stderr=True)


class CliContext:
    """Shared state for subcommands."""

    def __init__(self, config_path: Optional[Path] = None):
        self.store = ConfigStore(config_path)
        self._config: Optional[LauncherConfig] = None

    @property
    def config(self) -> LauncherConfig:
        if self._config is None:
            self._config = self.store.load_or_default()
        return self._config

    def runner(self) -> CommandRunner:
        return CommandRunner(timeout=self.config.windows.probe_timeout)


def _display_results(mode: str, results: List[Candidate], total: int) -> None:
    table = Table(title=f"Mode: {mode} ({len(results)} of {total} results)")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Kind", style="cyan")
    table.add_column("Title")
    table.add_column("Detail", style="dim")

    for position, candidate in enumerate(results, start=1):
        style = "red" if candidate.kind == "notice" and getattr(candidate, "level", "") == "error" else None
        table.add_row(str(position), candidate.kind, candidate.title, candidate.subtitle, style=style)

    console.print(table)


async def _routed_session(ctx: CliContext, text: str) -> LauncherSession:
    session = LauncherSession.create(ctx.config, ctx.store, runner=ctx.runner())
    await session.wait_until_loaded()
    await session.handle_query(text)
    return session


@click.group()
@click.version_option(__version__, prog_name="poppi")
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option(
    '--config', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Configuration file (default: $XDG_CONFIG_HOME/poppi_launcher/config.json)'
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, debug: bool, config_path: Optional[Path]):
    """Keystroke-driven launcher for apps, windows, emoji, commands and math."""
    setup_logging(verbose=verbose, debug=debug)
    ctx.obj = CliContext(config_path)


@cli.command()
@click.argument('text', nargs=-1)
@click.option('--json', 'output_json', is_flag=True, help='Output JSON instead of a table')
@click.option('--all', 'show_all', is_flag=True, help='Show every result, not only the displayed ones')
@click.pass_obj
def query(ctx: CliContext, text, output_json: bool, show_all: bool):
    """
    Classify TEXT and show the results the launcher would display.

    Examples:
      poppi query fire
      poppi query "2 * (3 + 4)"
      poppi query :rocket
    """
    session = asyncio.run(_routed_session(ctx, " ".join(text)))
    state = session.state
    results = state.results if show_all else state.displayed_results

    if output_json:
        click.echo(json.dumps({
            "mode": state.mode.value,
            "total": len(state.results),
            "results": [candidate_to_dict(c) for c in results],
        }, indent=2, ensure_ascii=False))
    else:
        _display_results(state.mode.value, results, len(state.results))


@cli.command()
@click.argument('text', nargs=-1)
@click.option('--index', '-i', type=click.IntRange(min=1), default=1, help='Displayed result to run (1-based)')
@click.pass_obj
def run(ctx: CliContext, text, index: int):
    """
    Classify TEXT and execute a result.

    Exit codes:
      0 - Action started
      1 - Action failed or nothing to run
    """
    async def _run():
        session = await _routed_session(ctx, " ".join(text))
        return await session.activate(index - 1)

    outcome = asyncio.run(_run())
    if outcome.success:
        console.print(f"[green]{outcome.message}[/green]")
        sys.exit(0)
    err_console.print(f"[red]Error: {outcome.message}[/red]")
    sys.exit(1)


@cli.command()
@click.option('--json', 'output_json', is_flag=True, help='Output JSON instead of a table')
@click.pass_obj
def windows(ctx: CliContext, output_json: bool):
    """
    List switchable windows through the backend chain.

    Exit codes:
      0 - Windows listed
      2 - No backend could list windows
    """
    runner = ctx.runner()
    enumerator = WindowEnumerator(build_default_tiers(runner, ctx.config.windows.max_windows))

    try:
        result = asyncio.run(enumerator.enumerate())
    except WindowEnumerationError as e:
        if output_json:
            click.echo(json.dumps({"error": e.to_dict()}, indent=2))
        else:
            err_console.print(f"[red]Error: {e.message}[/red]")
            if e.suggestion:
                err_console.print(f"[dim]Tip: {e.suggestion}[/dim]")
        sys.exit(2)

    if output_json:
        click.echo(json.dumps({
            "backends": result.backends,
            "windows": [
                {
                    "window_id": w.window_id,
                    "title": w.title,
                    "app_name": w.app_name,
                    "source": w.source.value,
                }
                for w in result.windows
            ],
        }, indent=2, ensure_ascii=False))
        return

    table = Table(title=f"Open Windows (via {', '.join(result.backends)})")
    table.add_column("ID", style="dim")
    table.add_column("App", style="cyan")
    table.add_column("Title")
    table.add_column("Source", style="dim")
    for window in result.windows:
        table.add_row(window.window_id, window.app_name, window.title, window.source.value)
    console.print(table)


@cli.command()
@click.pass_obj
def terminal(ctx: CliContext):
    """
    Show which terminal emulator commands will run in.

    Exit codes:
      0 - Terminal found
      2 - No terminal emulator available
    """
    runner = ctx.runner()
    launcher = TerminalLauncher(
        runner,
        TerminalLocator(runner, override=ctx.config.terminal.command),
        hold_open=ctx.config.terminal.hold_open,
    )

    async def _locate():
        emulator = await launcher.locator.locate()
        return emulator, await launcher.build_command("echo hello")

    try:
        emulator, example = asyncio.run(_locate())
    except TerminalNotFoundError as e:
        err_console.print(f"[red]Error: {e.message}[/red]")
        err_console.print(f"[dim]Tip: {e.suggestion}[/dim]")
        sys.exit(2)

    table = Table(title="Terminal Emulator", show_header=False)
    table.add_column("Property", style="dim")
    table.add_column("Value")
    table.add_row("Name", emulator.name)
    table.add_row("Executable", emulator.executable)
    table.add_row("Found via", emulator.origin)
    table.add_row("Example", " ".join(example))
    console.print(table)


@cli.group()
def config():
    """Inspect or create the configuration file."""


@config.command('show')
@click.pass_obj
def config_show(ctx: CliContext):
    """Print the effective configuration as JSON."""
    click.echo(json.dumps(ctx.config.model_dump(mode="json"), indent=2))


@config.command('path')
@click.pass_obj
def config_path(ctx: CliContext):
    """Print the configuration file location."""
    click.echo(str(ctx.store.config_file))


@config.command('init')
@click.option('--force', is_flag=True, help='Overwrite an existing configuration')
@click.pass_obj
def config_init(ctx: CliContext, force: bool):
    """Write the default configuration."""
    if ctx.store.config_file.exists() and not force:
        err_console.print(f"[yellow]{ctx.store.config_file} already exists (use --force to overwrite)[/yellow]")
        sys.exit(1)
    ctx.store.save(LauncherConfig())
    console.print(f"[green]Wrote default configuration to {ctx.store.config_file}[/green]")

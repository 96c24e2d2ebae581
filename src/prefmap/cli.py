"""prefmap CLI entry point.

Commands:
    show      Render a preferences file
    get       Print the value of one key
    top       List top-level entries
    groups    List first-level groups
    subtree   Render the entries below a key prefix
    config    View/edit configuration
"""

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from prefmap import __version__
from prefmap.constants import APP_NAME, ExitCode, Platform
from prefmap.core.store import PreferencesMap
from prefmap.exceptions import PlatformError, PrefMapError
from prefmap.utils.config import (
    get_config_path,
    get_value,
    load_config,
    resolve_platform,
    save_config,
    set_value,
)

console = Console()

PLATFORM_CHOICES = [p.value for p in Platform]


def _print_raw(text: str) -> None:
    """Write preference text exactly as rendered."""
    click.echo(text, nl=False)


def _load_prefs(path: str, platform_name: str | None) -> PreferencesMap:
    """Load a preferences file, exiting with a CLI error code on failure."""
    try:
        cfg = load_config()
        platform = resolve_platform(cfg, platform_name)
        return PreferencesMap.from_file(Path(path), platform=platform)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(ExitCode.KEYBOARD_INTERRUPT)
    except FileNotFoundError:
        console.print(f"[red]File not found: {path}[/red]")
        sys.exit(ExitCode.FILE_NOT_FOUND)
    except PlatformError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(ExitCode.INVALID_INPUT)
    except (PrefMapError, OSError) as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(ExitCode.GENERAL_ERROR)


def _default_indent() -> str:
    try:
        return get_value(load_config(), "display.indent", "")
    except PrefMapError:
        return ""


platform_option = click.option(
    "--platform",
    "platform_name",
    type=click.Choice(PLATFORM_CHOICES, case_sensitive=False),
    default=None,
    help="Platform for key overrides (default: config or detected)",
)


@click.group()
@click.version_option(version=__version__, prog_name=APP_NAME)
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """prefmap - Inspect key=value preference files."""
    if debug:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# ============================================================================
# QUERY COMMANDS
# ============================================================================


@main.command()
@click.argument("path", type=click.Path())
@platform_option
@click.option("--indent", default=None, help="Prefix for every line")
@click.option("--closed", is_flag=True, help="Append a closing brace")
def show(path: str, platform_name: str | None, indent: str | None, closed: bool) -> None:
    """Render a preferences file sorted by key.

    Examples:

        prefmap show boards.txt

        prefmap show boards.txt --platform windows --closed
    """
    prefs = _load_prefs(path, platform_name)
    if indent is None:
        indent = _default_indent()

    _print_raw(prefs.render_block(indent) if closed else prefs.render(indent))


@main.command()
@click.argument("path", type=click.Path())
@click.argument("key")
@platform_option
def get(path: str, key: str, platform_name: str | None) -> None:
    """Print the value stored under KEY."""
    prefs = _load_prefs(path, platform_name)

    if key not in prefs:
        console.print(f"[yellow]Key '{key}' not found[/yellow]")
        sys.exit(ExitCode.GENERAL_ERROR)

    _print_raw(prefs[key] + "\n")


@main.command()
@click.argument("path", type=click.Path())
@platform_option
def top(path: str, platform_name: str | None) -> None:
    """List the entries whose key has no '.'."""
    prefs = _load_prefs(path, platform_name).top_level_map()

    if not prefs:
        console.print("[yellow]No top-level entries[/yellow]")
        return

    table = Table(title="Top-Level Entries")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in prefs.items():
        table.add_row(escape(key), escape(value))

    console.print(table)


@main.command()
@click.argument("path", type=click.Path())
@platform_option
def groups(path: str, platform_name: str | None) -> None:
    """List first-level groups and their entry counts."""
    grouped = _load_prefs(path, platform_name).first_level_map()

    if not grouped:
        console.print("[yellow]No grouped entries[/yellow]")
        return

    table = Table(title="First-Level Groups")
    table.add_column("Group", style="cyan")
    table.add_column("Entries", justify="right")
    for name, sub in grouped.items():
        table.add_row(escape(name), str(len(sub)))

    console.print(table)


@main.command()
@click.argument("path", type=click.Path())
@click.argument("parent")
@platform_option
@click.option("--indent", default=None, help="Prefix for every line")
def subtree(path: str, parent: str, platform_name: str | None, indent: str | None) -> None:
    """Render the entries below PARENT with the prefix removed.

    Example:

        prefmap subtree boards.txt uno.upload
    """
    prefs = _load_prefs(path, platform_name).sub_tree(parent)
    if indent is None:
        indent = _default_indent()

    if not prefs:
        console.print(f"[yellow]No entries below '{parent}'[/yellow]")
        return

    _print_raw(prefs.render(indent))


# ============================================================================
# CONFIG COMMAND
# ============================================================================


@main.group()
def config() -> None:
    """View and edit configuration."""
    pass


@config.command("show")
def config_show() -> None:
    """Show current configuration."""
    try:
        cfg = load_config()
    except PrefMapError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(ExitCode.GENERAL_ERROR)

    console.print(f"[dim]Config file: {get_config_path()}[/dim]\n")
    console.print_json(json.dumps(cfg, indent=2))


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str) -> None:
    """Set a configuration value.

    KEY is a dot-separated path (e.g., platform.override)
    VALUE is the new value
    """
    try:
        cfg = load_config()
    except PrefMapError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(ExitCode.GENERAL_ERROR)

    if key == "platform.override" and value and value.lower() not in PLATFORM_CHOICES:
        console.print(f"[red]Unknown platform '{value}'[/red]")
        sys.exit(ExitCode.INVALID_INPUT)

    try:
        set_value(cfg, key, value)
    except PrefMapError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(ExitCode.INVALID_INPUT)
    save_config(cfg)
    console.print(f"[green]Set {key} = {value!r}[/green]")


@config.command("get")
@click.argument("key")
def config_get(key: str) -> None:
    """Get a configuration value.

    KEY is a dot-separated path (e.g., display.indent)
    """
    try:
        cfg = load_config()
    except PrefMapError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(ExitCode.GENERAL_ERROR)

    value = get_value(cfg, key)

    if value is None:
        console.print(f"[yellow]Key '{key}' not found[/yellow]")
        sys.exit(ExitCode.GENERAL_ERROR)

    console.print(f"{key} = {json.dumps(value)}", markup=False)


if __name__ == "__main__":
    main()

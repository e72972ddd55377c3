"""SCV CLI — command-line host for the item registry."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from scv import __version__

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "config_file", default=None, help="YAML settings file")
@click.option("--state", "state_path", default=None, help="Registry state file")
@click.pass_context
def main(ctx: click.Context, config_file: str | None, state_path: str | None):
    """SCV — a persistent registry of identified items.

    Items are addressed by unsigned 128-bit identifiers, given here in
    decimal.
    """
    from scv.config import ConfigError, load_settings
    from scv.log import setup_logging

    try:
        settings = load_settings(config_file)
    except ConfigError as e:
        raise click.UsageError(str(e))
    if state_path:
        settings.state_path = Path(state_path).expanduser()
    setup_logging(settings.log_level)
    ctx.obj = settings


@contextmanager
def _registry_errors():
    """Print registry failures and exit non-zero."""
    from scv.registry.errors import RegistryError

    try:
        yield
    except RegistryError as e:
        console.print(f"[red]Error:[/] {escape(e.message)}", soft_wrap=True)
        raise SystemExit(1)


def _store(settings):
    from scv.registry.store import JsonFileStore

    return JsonFileStore(settings.state_path)


def _open(settings):
    from scv.registry.item_registry import ItemRegistry

    return ItemRegistry.open(_store(settings))


# ── Lifecycle ────────────────────────────────────────────────────────


@main.command()
@click.pass_obj
def init(settings):
    """Create an empty registry. Fails if one already exists."""
    from scv.registry.item_registry import ItemRegistry

    with _registry_errors():
        ItemRegistry.initialize(_store(settings))
    console.print(f"[green]v[/] Registry initialized at {settings.state_path}")


# ── Items ────────────────────────────────────────────────────────────


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("item_id")
@click.argument("title")
@click.argument("score", type=click.IntRange(0, 65535))
@click.argument("content")
@click.pass_obj
def create(settings, item_id: str, title: str, score: int, content: str):
    """Store a new item under ITEM_ID."""
    from scv.registry.ids import parse_id

    with _registry_errors():
        _open(settings).create_item(parse_id(item_id), title, score, content)
    console.print(f"[green]v[/] Created item {item_id}")


@main.command()
@click.argument("item_id")
@click.pass_obj
def info(settings, item_id: str):
    """Show a readable summary of an item."""
    from scv.registry.ids import parse_id

    with _registry_errors():
        message = _open(settings).get_item_info(parse_id(item_id))
    console.print(message.strip(), markup=False, soft_wrap=True)


@main.command()
@click.argument("item_id")
@click.pass_obj
def get(settings, item_id: str):
    """Print an item as a table."""
    from scv.registry.ids import parse_id

    with _registry_errors():
        item = _open(settings).get_item(parse_id(item_id))

    if item is None:
        console.print(f"[yellow]No item {item_id}.[/]")
        return

    table = Table(title=f"Item {item_id}")
    table.add_column("Title", style="cyan")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Content")
    table.add_row(escape(item.title), str(item.score), escape(item.content))
    console.print(table)


@main.command()
@click.argument("item_id")
@click.pass_obj
def revoke(settings, item_id: str):
    """Delete the item stored under ITEM_ID."""
    from scv.registry.ids import parse_id

    with _registry_errors():
        _open(settings).revoke_item(parse_id(item_id))
    console.print(f"[green]v[/] Revoked item {item_id}")


@main.command()
@click.option("--caller", required=True, help="Identity of the account making this call")
@click.pass_obj
def reset(settings, caller: str):
    """Remove every item. Only the service owner may do this."""
    with _registry_errors():
        _open(settings).reset_all(caller=caller, owner=settings.owner)
    console.print("[green]v[/] All the items have been revoked.")


if __name__ == "__main__":
    main()

"""Diary CLI - entry form server and command-line access."""

import json
import logging
import sys

import click

from .adapters.memory_sheet import MemorySheetStore
from .config import load_config
from .web import create_app
from .workflows import get_diary, get_google_store, get_repository


@click.group()
@click.version_option()
def main():
    """Diary - spreadsheet-backed personal diary."""
    pass


@main.command()
@click.option("--host", default=None, help="Interface to bind (default from diary.conf)")
@click.option("--port", default=None, type=int, help="Port to listen on (default from diary.conf)")
@click.option("--memory", is_flag=True, help="Keep entries in memory instead of the configured backend")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def serve(host: str | None, port: int | None, memory: bool, debug: bool):
    """Run the diary entry web form."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = load_config()

    store = None
    if memory:
        store = MemorySheetStore()
        get_repository(config, store).initialize()

    try:
        service = get_diary(config, store=store)
    except ValueError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    app = create_app(service)
    app.run(host=host or config.host, port=port or config.port, debug=debug)


@main.command()
@click.argument("text")
def write(text: str):
    """Save a diary entry."""
    config = load_config()
    try:
        saved = get_diary(config).save(text)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not saved:
        click.echo(f"Sheet '{config.sheet_name}' not found, nothing saved. Run 'diary init' first.", err=True)
        sys.exit(1)
    click.echo("Saved.")


@main.command()
@click.option("--since", required=True, help="First date, yyyy/MM/dd")
@click.option("--until", required=True, help="Last date, yyyy/MM/dd")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show(since: str, until: str, as_json: bool):
    """Show diary entries between two dates."""
    config = load_config()
    try:
        entries = get_diary(config).get_between(since, until)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(entries, indent=2, ensure_ascii=False))
        return

    if not entries:
        click.echo(f"No diary entries between {since} and {until}.")
        return

    for i, entry_date in enumerate(sorted(entries)):
        if i:
            click.echo()
        click.echo(f"### {entry_date}")
        for text in entries[entry_date]:
            click.echo(f"  • {text}")


@main.command()
def init():
    """Create the diary sheet with its header rows."""
    config = load_config()
    try:
        created = get_repository(config).initialize()
    except (RuntimeError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if created:
        click.echo(f"Created sheet '{config.sheet_name}'.")
    else:
        click.echo(f"Sheet '{config.sheet_name}' already exists.")


@main.command()
def auth():
    """Authenticate with Google Sheets."""
    config = load_config()
    if not config.google_client_secret_file:
        click.echo("GOOGLE_CLIENT_SECRET_FILE not set in diary.conf", err=True)
        sys.exit(1)

    try:
        store = get_google_store(config)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if store.authenticate():
        click.echo(f"  ✓ Token saved to {store._token_path}")
    else:
        click.echo("  ✗ Authentication failed", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

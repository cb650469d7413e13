"""Days CLI - personal event log."""

import csv
import json
import logging
import sys
from datetime import date

import click

from .adapters.csv_records import CsvRecordFile
from .config import Config, data_directory, load_config
from .core.dates import format_date, parse_date
from .core.errors import (
    DateParseError,
    InvalidCommandError,
    MissingArgumentError,
    SetupError,
)
from .core.events import Event, format_line
from .core.filters import date_equals
from .core.grammar import parse_filter
from .core.listing import Listing
from .core.store import EventStore

logger = logging.getLogger(__name__)


def _today() -> date:
    return date.today()


def _get_config(debug: bool = False) -> Config:
    """Resolve the data directory and load days.conf. Raises SetupError."""
    data_dir = data_directory()
    if data_dir is None:
        raise SetupError("Unable to determine home directory (set HOME or DAYS_HOME)")

    config = load_config(data_dir)
    if not debug and isinstance(logging.getLevelName(config.log_level), int):
        logging.getLogger().setLevel(config.log_level)
    return config


def _open_store(config: Config) -> EventStore:
    """Load the event store. Raises SetupError if its location is unusable."""
    if not config.events_file.parent.is_dir():
        raise SetupError(f"{config.events_file.parent} does not exist, please create it (or run 'days init')")
    try:
        return EventStore.load(CsvRecordFile(config.events_file))
    except OSError as e:
        raise SetupError(f"Unable to read {config.events_file}: {e}") from e
    except (UnicodeDecodeError, csv.Error) as e:
        raise SetupError(f"{config.events_file} is not a readable UTF-8 CSV file: {e}") from e


def _setup_or_exit(ctx: click.Context) -> EventStore:
    try:
        config = _get_config(ctx.obj["debug"])
        return _open_store(config)
    except SetupError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _parse_date_option(value: str, param_hint: str = "'--date'") -> date:
    try:
        return parse_date(value)
    except DateParseError as e:
        raise click.BadParameter(str(e), param_hint=param_hint) from e


def _check_text_option(value: str, param_hint: str) -> str:
    """Reject text that cannot be stored as UTF-8 (e.g. undecodable argv bytes)."""
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise click.BadParameter("not valid UTF-8 text", param_hint=param_hint) from e
    return value


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """Days - personal event log."""
    logging.basicConfig(
        format="%(levelname)s: %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


@main.command()
@click.pass_context
def init(ctx):
    """Create the data directory and an empty events file."""
    try:
        config = _get_config(ctx.obj["debug"])
    except SetupError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    records = CsvRecordFile(config.events_file)
    try:
        config.events_file.parent.mkdir(parents=True, exist_ok=True)
        if records.exists():
            click.echo(f"{config.events_file} already exists.")
            return
        records.create()
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Created {config.events_file}")


@main.command("list", context_settings={"ignore_unknown_options": True})
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.argument("criteria", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def list_events(ctx, criteria: tuple[str, ...], as_json: bool):
    """List events, optionally filtered.

    \b
    Criteria:
      --today
      --date YYYY-MM-DD
      --before-date YYYY-MM-DD [--after-date YYYY-MM-DD]
      --after-date YYYY-MM-DD
      --categories C1,C2,... [--exclude]
      --no-category
    """
    reference = _today()
    try:
        spec = parse_filter(list(criteria), reference)
    except (MissingArgumentError, InvalidCommandError) as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    store = _setup_or_exit(ctx)
    listing = Listing(store.events, spec, reference)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        "date": format_date(event.date),
                        "category": event.category,
                        "description": event.description,
                        "days": delta,
                    }
                    for event, delta in listing.entries()
                ],
                indent=2,
            )
        )
        return

    for line in listing:
        click.echo(line)


@main.command()
@click.option("--date", "-d", "event_date", default=None,
              help="Event date (YYYY-MM-DD), defaults to today")
@click.option("--category", "-c", required=True, help="Event category (may be empty)")
@click.option("--description", required=True, help="Event description")
@click.pass_context
def add(ctx, event_date: str | None, category: str, description: str):
    """Add an event."""
    target = _parse_date_option(event_date) if event_date is not None else _today()
    _check_text_option(category, "'--category'")
    _check_text_option(description, "'--description'")
    store = _setup_or_exit(ctx)

    event = Event(date=target, category=category, description=description)
    try:
        store.append(event)
    except OSError as e:
        click.echo(f"Error: could not write {store.records.path}: {e}", err=True)
        sys.exit(1)

    logger.debug(f"Appended event on {format_date(target)}")
    click.echo(f"Added: {format_line(event, _today())}")


@main.command()
@click.option("--date", "-d", "event_date", required=True,
              help="Delete events on this date (YYYY-MM-DD)")
@click.option("--dry-run", is_flag=True, help="Show what would be deleted without deleting")
@click.pass_context
def delete(ctx, event_date: str, dry_run: bool):
    """Delete events on a date."""
    target = _parse_date_option(event_date)
    store = _setup_or_exit(ctx)

    try:
        result = store.remove_where(date_equals(target), dry_run=dry_run)
    except OSError as e:
        click.echo(f"Error: could not rewrite {store.records.path}: {e}", err=True)
        sys.exit(1)

    reference = _today()
    if dry_run:
        click.echo("Dry run, would delete:")
        for event in result.removed:
            click.echo(f"  {format_line(event, reference)}")
        return

    if not result.removed:
        click.echo(f"No events on {format_date(target)}.")
        return

    for event in result.removed:
        click.echo(f"Deleted: {format_line(event, reference)}")
    click.echo(f"{len(result.removed)} event(s) deleted.")


if __name__ == "__main__":
    main()

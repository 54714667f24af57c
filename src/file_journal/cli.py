"""file-journal CLI - dated markdown journal entries."""

import logging
import sys
from pathlib import Path

import click

from .config import CONFIG_ENV_VAR, default_config_file
from .errors import InvalidTitleError, JournalError
from .workflows import (
    OUTPUT_FORMATS,
    create_entry,
    entries_to_json,
    get_store,
    init_config,
    list_entries,
)

logger = logging.getLogger(__name__)

path_option = click.option(
    "--path",
    "-p",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Override the default journal path",
)


@click.group()
@click.version_option(package_name="file-journal")
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=CONFIG_ENV_VAR,
    default=None,
    help="Path to config file",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, config_file: Path | None, debug: bool):
    """A CLI for creating journal entries."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file


@main.command()
@click.argument("title")
@click.argument("note", required=False)
@path_option
@click.pass_context
def new(ctx, title: str, note: str | None, path: Path | None):
    """Create a new journal entry.

    TITLE names the entry (a trailing .md is optional); NOTE is the text
    stored in the file.
    """
    try:
        store = get_store(path, ctx.obj["config_file"])
        entry = create_entry(store, title, note)
    except InvalidTitleError as e:
        raise click.BadParameter(str(e), param_hint="TITLE")
    except (JournalError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Created journal entry: {entry}")


@main.command()
@click.option("--day", "-d", type=click.IntRange(1, 31), default=None,
              help="Day of month (1-31), defaults to today if not specified")
@click.option("--month", "-m", type=click.IntRange(1, 12), default=None,
              help="Month (1-12), defaults to current month if not specified")
@click.option("--year", "-y", type=int, default=None,
              help="Year (e.g., 2024), defaults to current year if not specified")
@click.option("--week", is_flag=True, help="Get entries for the current week")
@path_option
@click.option("--format", "-f", "output_format", type=click.Choice(OUTPUT_FORMATS),
              default="paths", show_default=True, help="Output format")
@click.pass_context
def get(ctx, day: int | None, month: int | None, year: int | None, week: bool,
        path: Path | None, output_format: str):
    """Get journal entries for a specific date."""
    if week and (day is not None or month is not None or year is not None):
        raise click.UsageError("--week cannot be combined with --day, --month or --year")

    try:
        store = get_store(path, ctx.obj["config_file"])
        entries = list_entries(store, day=day, month=month, year=year, week=week)
    except (JournalError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output_format == "json":
        click.echo(entries_to_json(entries))
        return

    if not entries:
        click.echo("No journal entries found.", err=True)
        return

    for entry in entries:
        click.echo(str(entry))
        if output_format != "content":
            continue
        click.echo("-" * 40)
        try:
            click.echo(store.read(entry))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping unreadable entry {entry}: {e}")
            click.echo(f"Error reading {entry}: {e}", err=True)
        click.echo()


@main.command()
@click.option("--journal-path", default=None,
              help="Journal directory to store (prompted for if omitted)")
@click.option("--force", is_flag=True, help="Overwrite an existing config without asking")
@click.pass_context
def init(ctx, journal_path: str | None, force: bool):
    """Initialize a new journal configuration."""
    config_file = ctx.obj["config_file"] or default_config_file()

    if config_file.exists() and not force:
        if not click.confirm(f"Config {config_file} already exists. Overwrite?"):
            return

    if journal_path is None:
        journal_path = click.prompt("Enter the default journal path (e.g., ~/Documents/journal)")

    try:
        written = init_config(journal_path, config_file)
    except (JournalError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Created config at: {written}")


if __name__ == "__main__":
    main()

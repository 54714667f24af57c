"""Shared workflow layer used by the CLI commands."""

import json
import logging
from datetime import date, datetime
from pathlib import Path

from .adapters.file_journal import FileJournalStore
from .config import Config, load_config, save_config
from .core.selector import selector_from_options, week_dates
from .errors import ConfigInvalidError
from .ports.entry_store import EntryStore

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("paths", "content", "json")


def get_store(path: Path | None = None, config_file: Path | None = None) -> FileJournalStore:
    """
    Resolve the journal store.

    An explicit path wins and the config is not read at all; otherwise
    default_path from the config file is used.
    """
    if path is not None:
        return FileJournalStore(path)
    config = load_config(config_file)
    return FileJournalStore(config.journal_dir)


def create_entry(
    store: EntryStore,
    title: str,
    note: str | None = None,
    now: datetime | None = None,
) -> Path:
    """Create an entry stamped with the current time."""
    return store.create(title, note, now=now)


def list_entries(
    store: EntryStore,
    day: int | None = None,
    month: int | None = None,
    year: int | None = None,
    week: bool = False,
    today: date | None = None,
) -> list[Path]:
    """List entries for the requested day/month/year, or the current week."""
    today = today or date.today()
    if week:
        logger.debug(f"Listing week of {today}")
        return store.find_dates(week_dates(today))
    selector = selector_from_options(day, month, year, today)
    return store.find(selector, today=today)


def entries_to_json(entries: list[Path]) -> str:
    return json.dumps([str(p) for p in entries])


def init_config(journal_path: str, config_file: Path | None = None) -> Path:
    """Write a config pointing at journal_path. Returns the config path."""
    if not journal_path.strip():
        raise ConfigInvalidError("Journal path must not be empty")
    config = Config(default_path=journal_path.strip())
    return save_config(config, config_file)

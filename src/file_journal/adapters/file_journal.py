"""File-based journal storage adapter."""

import logging
from datetime import date, datetime
from pathlib import Path

from ..core.paths import (
    EntryName,
    entry_filename,
    is_valid_month,
    is_valid_year,
    month_dir,
    month_folder,
    render_entry,
    year_folder,
)
from ..core.selector import Selector
from ..errors import EntryExistsError, InvalidJournalLayoutError

logger = logging.getLogger(__name__)


class FileJournalStore:
    """
    File-based journal storage.

    Implements EntryStore protocol. Entries live in root/YYYY/MM and are
    named dd-HHMMSS-title.md, so sorting by path is chronological.
    """

    def __init__(self, journal_dir: Path | str):
        self.journal_dir = Path(journal_dir).expanduser()

    def _ensure_month_dir(self, now: datetime) -> Path:
        """Create root/YYYY/MM if needed and check its layout."""
        target_dir = month_dir(self.journal_dir, now)
        if not target_dir.is_dir():
            logger.debug(f"Creating {target_dir}")
        target_dir.mkdir(parents=True, exist_ok=True)

        if not is_valid_month(target_dir.name):
            raise InvalidJournalLayoutError(f"Invalid month folder: {target_dir.name}")
        if not is_valid_year(target_dir.parent.name):
            raise InvalidJournalLayoutError(f"Invalid year folder: {target_dir.parent.name}")
        return target_dir

    def create(self, title: str, note: str | None = None, now: datetime | None = None) -> Path:
        """
        Create a new entry and return its path.

        The filename and the Date line come from the same timestamp. An
        existing file is never overwritten.

        Raises:
            EntryExistsError: an entry with this second and title exists
            InvalidTitleError: the title is empty after sanitizing
            OSError: the directory or file could not be written
        """
        now = now or datetime.now()
        filename = entry_filename(now, title)
        path = self._ensure_month_dir(now) / filename

        try:
            with path.open("x", encoding="utf-8") as f:
                f.write(render_entry(now, title, note))
        except FileExistsError:
            raise EntryExistsError(f"File '{filename}' already exists") from None

        logger.debug(f"Wrote entry {path}")
        return path

    def _year_dirs(self, year: int | None) -> list[Path]:
        if year is not None:
            candidate = self.journal_dir / year_folder(year)
            return [candidate] if candidate.is_dir() else []
        if not self.journal_dir.is_dir():
            logger.debug(f"Journal directory {self.journal_dir} does not exist")
            return []
        return sorted(
            p for p in self.journal_dir.iterdir() if p.is_dir() and is_valid_year(p.name)
        )

    def _month_dirs(self, year_dir: Path, month: int | None) -> list[Path]:
        if month is not None:
            candidate = year_dir / month_folder(month)
            return [candidate] if candidate.is_dir() else []
        return sorted(p for p in year_dir.iterdir() if p.is_dir() and is_valid_month(p.name))

    def _entries_in(self, directory: Path, selector: Selector) -> list[Path]:
        entries = []
        for path in directory.iterdir():
            if not path.is_file():
                continue
            name = EntryName.parse(path.name)
            if name is None:
                continue
            if selector.matches_day(name):
                entries.append(path)
        return sorted(entries, key=lambda p: p.name)

    def find(self, selector: Selector, today: date | None = None) -> list[Path]:
        """
        List entries matching a selector, oldest first.

        An empty selector means today. Missing year or month
        directories simply contribute nothing.
        """
        selector = selector.resolve(today or date.today())
        logger.debug(f"Searching {self.journal_dir} for {selector}")

        entries = []
        for year_dir in self._year_dirs(selector.year):
            for directory in self._month_dirs(year_dir, selector.month):
                entries.extend(self._entries_in(directory, selector))
        return entries

    def find_dates(self, dates: list[date]) -> list[Path]:
        """List entries created on any of the given dates, oldest first."""
        entries = []
        for target in sorted(set(dates)):
            entries.extend(self.find(Selector.for_date(target)))
        return entries

    def read(self, path: Path) -> str:
        """Read the content of an entry."""
        return Path(path).read_text(encoding="utf-8")

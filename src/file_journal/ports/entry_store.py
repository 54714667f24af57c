"""Entry storage interface."""

from datetime import date, datetime
from pathlib import Path
from typing import Protocol

from ..core.selector import Selector


class EntryStore(Protocol):
    """Interface for creating and finding journal entries."""

    def create(self, title: str, note: str | None = None, now: datetime | None = None) -> Path:
        """Create a new entry and return its path."""
        ...

    def find(self, selector: Selector, today: date | None = None) -> list[Path]:
        """List entries matching a selector, oldest first."""
        ...

    def find_dates(self, dates: list[date]) -> list[Path]:
        """List entries created on any of the given dates, oldest first."""
        ...

    def read(self, path: Path) -> str:
        """Read the content of an entry."""
        ...

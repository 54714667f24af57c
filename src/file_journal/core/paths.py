"""Pure path and filename logic for journal entries - no I/O dependencies."""

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..errors import InvalidTitleError

ENTRY_SUFFIX = ".md"

# Characters replaced with "-" when building a filename from a title
UNSAFE_TITLE_CHARS = " /\\:?*\"'<>|"

_ENTRY_NAME_RE = re.compile(r"^(?P<day>[0-9]{2})-(?P<time>[0-9]{6})-(?P<title>.+)\.md$")


@dataclass(frozen=True)
class EntryName:
    """The components encoded in an entry filename (dd-HHMMSS-title.md)."""

    day: int
    time: str
    title: str

    @classmethod
    def parse(cls, filename: str) -> "EntryName | None":
        """Parse an entry filename. Returns None for non-entry files."""
        match = _ENTRY_NAME_RE.match(filename)
        if not match:
            return None
        return cls(
            day=int(match.group("day")),
            time=match.group("time"),
            title=match.group("title"),
        )


def year_folder(year: int) -> str:
    return str(year)


def month_folder(month: int) -> str:
    return f"{month:02d}"


def is_valid_year(folder_name: str) -> bool:
    """Year folders are exactly four digits."""
    return len(folder_name) == 4 and folder_name.isascii() and folder_name.isdigit()


def is_valid_month(folder_name: str) -> bool:
    """Month folders are two digits between 01 and 12."""
    if len(folder_name) != 2 or not (folder_name.isascii() and folder_name.isdigit()):
        return False
    return 1 <= int(folder_name) <= 12


def month_dir(root: Path, when: datetime) -> Path:
    """Directory holding entries created at `when`: root/YYYY/MM."""
    return root / year_folder(when.year) / month_folder(when.month)


def title_stem(title: str) -> str:
    """Strip one trailing .md from a user-supplied title."""
    if title.endswith(ENTRY_SUFFIX):
        return title[: -len(ENTRY_SUFFIX)]
    return title


def sanitize_title(title: str) -> str:
    """
    Make a title safe to embed in a filename.

    Unsafe characters become "-", runs of "-" collapse to one, and a
    trailing "-" is dropped. A leading "-" is kept.
    """
    safe = "".join("-" if ch in UNSAFE_TITLE_CHARS else ch for ch in title)
    safe = re.sub(r"-{2,}", "-", safe)
    return safe.rstrip("-")


def entry_filename(when: datetime, title: str) -> str:
    """
    Build the entry filename dd-HHMMSS-title.md.

    Raises:
        InvalidTitleError: if nothing usable is left of the title.
    """
    safe_title = sanitize_title(title_stem(title))
    if not safe_title:
        raise InvalidTitleError(f"Title {title!r} is empty after sanitizing")
    return f"{when.day:02d}-{when:%H%M%S}-{safe_title}{ENTRY_SUFFIX}"


def format_entry_date(when: datetime) -> str:
    """Render a date as DD-MM-YYYY."""
    return f"{when.day:02d}-{when.month:02d}-{when.year}"


def render_entry(when: datetime, title: str, note: str | None = None) -> str:
    """Initial markdown content for a new entry."""
    return f"# {title_stem(title)}\n\nDate: {format_entry_date(when)}\n\n{note or ''}\n"

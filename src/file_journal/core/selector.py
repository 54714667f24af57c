"""Entry selection logic - which day/month/year an entry listing covers."""

from dataclasses import dataclass
from datetime import date, timedelta

from ..errors import InvalidSelectorError
from .paths import EntryName


@dataclass(frozen=True)
class Selector:
    """
    Day/month/year filter for listing entries.

    None means "any". A selector with every field set to None is
    treated as today by `resolve`.
    """

    day: int | None = None
    month: int | None = None
    year: int | None = None

    def __post_init__(self):
        if self.day is not None and not 1 <= self.day <= 31:
            raise InvalidSelectorError(f"Day must be between 1 and 31, got {self.day}")
        if self.month is not None and not 1 <= self.month <= 12:
            raise InvalidSelectorError(f"Month must be between 1 and 12, got {self.month}")

    @property
    def is_empty(self) -> bool:
        return self.day is None and self.month is None and self.year is None

    @classmethod
    def for_date(cls, target: date) -> "Selector":
        return cls(day=target.day, month=target.month, year=target.year)

    def resolve(self, today: date) -> "Selector":
        """An empty selector means today; anything else is kept as is."""
        if self.is_empty:
            return Selector.for_date(today)
        return self

    def matches_day(self, name: EntryName) -> bool:
        return self.day is None or name.day == self.day


def selector_from_options(
    day: int | None,
    month: int | None,
    year: int | None,
    today: date,
) -> Selector:
    """
    Fill in CLI defaults for a listing.

    - nothing given: today
    - year only: the whole year
    - month given: the whole month, year defaults to the current one
    - day given: that day, month and year default to the current ones
    """
    if day is None and month is None and year is None:
        return Selector.for_date(today)

    if day is not None:
        return Selector(
            day=day,
            month=month if month is not None else today.month,
            year=year if year is not None else today.year,
        )

    if month is not None:
        return Selector(month=month, year=year if year is not None else today.year)

    return Selector(year=year)


def week_dates(today: date) -> list[date]:
    """Monday through Sunday of the week containing `today`."""
    monday = today - timedelta(days=today.weekday())
    return [monday + timedelta(days=i) for i in range(7)]

"""Tests for the file-based journal store."""

from datetime import date, datetime

import pytest

from file_journal.adapters.file_journal import FileJournalStore
from file_journal.core.selector import Selector
from file_journal.errors import EntryExistsError, InvalidJournalLayoutError


def write_entry(root, year, month, filename, content="content"):
    directory = root / f"{year}" / f"{month:02d}"
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(content)
    return path


@pytest.fixture
def journal(tmp_path):
    """Journal tree with entries in Jan 2025, Feb 2026 and Mar 2026."""
    write_entry(tmp_path, 2026, 2, "17-081503-note1.md", "# Note 1\n\nDate: 17-02-2026\n")
    write_entry(tmp_path, 2026, 2, "17-101200-note2.md", "# Note 2\n\nDate: 17-02-2026\n")
    write_entry(tmp_path, 2026, 2, "18-090000-note3.md", "# Note 3\n\nDate: 18-02-2026\n")
    write_entry(tmp_path, 2026, 3, "01-120000-march-note.md")
    write_entry(tmp_path, 2025, 1, "15-080000-2025-note.md")
    return FileJournalStore(tmp_path)


def names(paths):
    return [p.name for p in paths]


class TestCreate:
    def test_creates_year_month_tree(self, tmp_path):
        store = FileJournalStore(tmp_path)
        path = store.create("meeting.md", "Discussed roadmap", now=datetime(2026, 2, 17, 8, 15, 3))

        assert path == tmp_path / "2026" / "02" / "17-081503-meeting.md"
        assert path.read_text() == "# meeting\n\nDate: 17-02-2026\n\nDiscussed roadmap\n"

    def test_creates_missing_root(self, tmp_path):
        store = FileJournalStore(tmp_path / "new" / "journal")
        path = store.create("x", now=datetime(2026, 2, 17, 8, 15, 3))
        assert path.exists()

    def test_second_entry_same_day(self, tmp_path):
        """An existing month directory is not an error."""
        store = FileJournalStore(tmp_path)
        first = store.create("morning", now=datetime(2026, 2, 17, 8, 0, 0))
        second = store.create("evening", now=datetime(2026, 2, 17, 20, 0, 0))

        assert first.parent == second.parent
        assert sorted(p.name for p in first.parent.iterdir()) == [
            "17-080000-morning.md",
            "17-200000-evening.md",
        ]

    def test_same_second_same_title_fails(self, tmp_path):
        """A collision never overwrites the existing entry."""
        store = FileJournalStore(tmp_path)
        now = datetime(2026, 2, 17, 8, 15, 3)
        path = store.create("x", "first", now=now)

        with pytest.raises(EntryExistsError, match="already exists"):
            store.create("x", "second", now=now)

        assert "first" in path.read_text()

    def test_filename_day_matches_date_line(self, tmp_path):
        store = FileJournalStore(tmp_path)
        path = store.create("late", now=datetime(2026, 3, 1, 23, 59, 59))

        assert path.name.startswith("01-")
        assert "Date: 01-03-2026" in path.read_text()

    def test_expands_user(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        store = FileJournalStore("~/journal")
        assert store.journal_dir == tmp_path / "journal"

    def test_rejects_non_four_digit_year(self, tmp_path):
        store = FileJournalStore(tmp_path)
        with pytest.raises(InvalidJournalLayoutError, match="Invalid year folder"):
            store.create("x", now=datetime(999, 1, 1))


class TestFind:
    def test_by_day(self, journal):
        entries = journal.find(Selector(day=17, month=2, year=2026))
        assert names(entries) == ["17-081503-note1.md", "17-101200-note2.md"]

    def test_by_other_day(self, journal):
        entries = journal.find(Selector(day=18, month=2, year=2026))
        assert names(entries) == ["18-090000-note3.md"]

    def test_by_month(self, journal):
        entries = journal.find(Selector(month=2, year=2026))
        assert names(entries) == [
            "17-081503-note1.md",
            "17-101200-note2.md",
            "18-090000-note3.md",
        ]

    def test_by_year(self, journal):
        entries = journal.find(Selector(year=2026))
        assert names(entries) == [
            "17-081503-note1.md",
            "17-101200-note2.md",
            "18-090000-note3.md",
            "01-120000-march-note.md",
        ]

    def test_other_year(self, journal):
        assert names(journal.find(Selector(year=2025))) == ["15-080000-2025-note.md"]

    def test_month_across_years(self, journal):
        """Without a year every year folder is searched."""
        assert names(journal.find(Selector(month=1))) == ["15-080000-2025-note.md"]

    def test_day_across_everything(self, journal):
        assert names(journal.find(Selector(day=1))) == ["01-120000-march-note.md"]

    def test_chronological_order_across_years(self, journal, tmp_path):
        """Years, then months, then filenames ascend."""
        write_entry(tmp_path, 2024, 12, "31-235959-old.md")
        entries = journal.find(Selector(day=None, month=None, year=None).resolve(date(2026, 2, 17)))
        assert names(entries) == ["17-081503-note1.md", "17-101200-note2.md"]

        write_entry(tmp_path, 2025, 12, "01-000000-december.md")
        assert names(journal.find(Selector(day=31))) == ["31-235959-old.md"]
        assert names(journal.find(Selector(month=12))) == [
            "31-235959-old.md",
            "01-000000-december.md",
        ]

    def test_empty_selector_is_today(self, journal):
        entries = journal.find(Selector(), today=date(2026, 3, 1))
        assert names(entries) == ["01-120000-march-note.md"]

    def test_no_match(self, journal):
        assert journal.find(Selector(day=25, month=2, year=2026)) == []

    def test_missing_month_directory(self, journal):
        assert journal.find(Selector(month=11, year=2025)) == []

    def test_missing_year_directory(self, journal):
        assert journal.find(Selector(year=1999)) == []

    def test_missing_root(self, tmp_path):
        store = FileJournalStore(tmp_path / "nope")
        assert store.find(Selector(year=2026)) == []
        assert store.find(Selector(month=2)) == []

    def test_ignores_non_entry_files(self, journal, tmp_path):
        write_entry(tmp_path, 2026, 2, "README.md")
        write_entry(tmp_path, 2026, 2, "17-081503-draft.txt")
        (tmp_path / "2026" / "02" / "17-000000-dir.md").mkdir()
        (tmp_path / "misc").mkdir()
        (tmp_path / "2026" / "extra").mkdir()

        entries = journal.find(Selector(year=2026))
        assert len(entries) == 4

    def test_found_paths_are_under_root(self, journal, tmp_path):
        for entry in journal.find(Selector(year=2026)):
            assert entry.is_relative_to(tmp_path)


class TestFindDates:
    def test_collects_each_date(self, journal):
        entries = journal.find_dates([date(2026, 3, 1), date(2026, 2, 17)])
        assert names(entries) == [
            "17-081503-note1.md",
            "17-101200-note2.md",
            "01-120000-march-note.md",
        ]

    def test_no_dates(self, journal):
        assert journal.find_dates([]) == []


class TestRead:
    def test_read(self, journal):
        [entry] = journal.find(Selector(day=18, month=2, year=2026))
        assert "Date: 18-02-2026" in journal.read(entry)

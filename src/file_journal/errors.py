"""Exceptions raised by file-journal."""


class JournalError(Exception):
    """Base class for journal errors reported to the user."""


class ConfigError(JournalError):
    """Configuration could not be used."""


class ConfigMissingError(ConfigError):
    """No config file found and no journal path supplied."""


class ConfigInvalidError(ConfigError):
    """Config file is malformed or lacks default_path."""


class EntryExistsError(JournalError):
    """An entry with the same timestamp and title already exists."""


class InvalidJournalLayoutError(JournalError):
    """A year or month folder name does not follow the YYYY/MM layout."""


class InvalidSelectorError(JournalError, ValueError):
    """A day or month argument is out of range."""


class InvalidTitleError(JournalError, ValueError):
    """A title has nothing left to put in a filename after sanitizing."""

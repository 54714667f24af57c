"""file-journal - dated markdown journal entries in a YYYY/MM tree."""

__version__ = "0.1.0"

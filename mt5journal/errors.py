"""Exceptions raised by MT5 Journal."""


class JournalError(Exception):
    """Base class for MT5 Journal errors."""


class FormatError(JournalError):
    """The input could not be turned into a journal.

    Raised when the text has no data rows, lacks required columns, or
    yields no complete trades.
    """


class ConfigError(JournalError):
    """The configuration file exists but could not be read."""

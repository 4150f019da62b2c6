# ==============================================
# Exceptions
# ==============================================
#
# PURPOSE:
#   One exception hierarchy for the whole package so callers can
#   tell apart "bad field value", "bad command shape", "bad command
#   for the current state" and "bad data file".
#
# HIERARCHY:
# ----------
#   LinkyTimeError
#   ├── ValidationError        → a field value fails its constraint
#   ├── ParseError
#   │   ├── ParseFormatError   → input does not match the command shape
#   │   └── UnknownCommandError
#   ├── CommandError           → rule broken against the live collection
#   ├── ModelError
#   │   ├── DuplicateEntryError
#   │   └── EntryNotFoundError
#   └── PersistenceError
#       ├── IllegalValueError     → malformed record in the data file
#       └── DuplicateRecordError  → two identical records in the data file
#
# ==============================================

from typing import Optional


class LinkyTimeError(Exception):
    """Base class for every error raised by LinkyTime."""


class ValidationError(LinkyTimeError, ValueError):
    """A raw field value does not satisfy its constraint."""


class ParseError(LinkyTimeError):
    """User input could not be turned into a command."""


class ParseFormatError(ParseError):
    """
    Input does not match the expected command or argument shape.

    Attributes:
        usage: Usage text of the command being parsed, if known
    """

    def __init__(self, message: str, usage: Optional[str] = None):
        super().__init__(message)
        self.usage = usage


class UnknownCommandError(ParseError):
    """The command word is not one LinkyTime understands."""


class CommandError(LinkyTimeError):
    """A command broke a business rule against the current collection."""


class ModelError(LinkyTimeError):
    """A MeetingCollection operation was refused."""


class DuplicateEntryError(ModelError):
    """The entry already exists in the collection."""


class EntryNotFoundError(ModelError):
    """The entry is not in the collection."""


class PersistenceError(LinkyTimeError):
    """The persisted document could not be read or written."""


class IllegalValueError(PersistenceError):
    """A persisted record is structurally invalid or holds an invalid value."""


class DuplicateRecordError(PersistenceError):
    """The persisted document holds two identical meeting entries."""

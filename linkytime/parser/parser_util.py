"""
Helpers that turn raw argument text into indexes and field value types.

Every helper raises ValidationError (or ParseFormatError for indexes);
the command parsers attach their usage text.
"""

import re
from typing import FrozenSet, Iterable

from linkytime.commands.index import Index
from linkytime.exceptions import ParseFormatError
from linkytime.model.fields import (
    IsRecurring,
    MeetingDateTime,
    MeetingDuration,
    MeetingName,
    MeetingUrl,
    ModuleCode,
    Tag,
)

MESSAGE_INVALID_INDEX = "Index is not an integer."

INDEX_PATTERN = re.compile(r'^[+-]?\d+$', re.ASCII)


def parse_index(text: str) -> Index:
    """
    Parse a 1-based index as typed by the user.

    Range is not checked here: "0" parses, and fails later against
    the filtered view.

    Raises:
        ParseFormatError: If text is not an integer
    """
    text = text.strip()
    if not INDEX_PATTERN.match(text):
        raise ParseFormatError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(text))


def parse_name(text: str) -> MeetingName:
    return MeetingName(text)


def parse_url(text: str) -> MeetingUrl:
    return MeetingUrl(text)


def parse_date_time(text: str) -> MeetingDateTime:
    return MeetingDateTime(text)


def parse_duration(text: str) -> MeetingDuration:
    return MeetingDuration(text)


def parse_module(text: str) -> ModuleCode:
    return ModuleCode(text)


def parse_is_recurring(text: str) -> IsRecurring:
    return IsRecurring(text)


def parse_tags(values: Iterable[str]) -> FrozenSet[Tag]:
    """Tags are case-sensitive; "Lab" and "lab" are two tags."""
    return frozenset(Tag(value) for value in values)

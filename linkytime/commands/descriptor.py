# ==============================================
# EditDescriptor
# ==============================================
#
# PURPOSE:
#   The partial field set carried by an edit command. Every field
#   is either Present(value) or ABSENT; there is no bare None.
#
# TYPES:
# ------
# - Present (frozen dataclass)   → a field the user supplied
# - ABSENT                       → singleton: keep the existing value
# - FieldUpdate                  → Union[Present, _Absent]
#
# CLASS: EditDescriptor (frozen dataclass)
# ----------------------------------------
#   One FieldUpdate per MeetingEntry field. A present tags field
#   is the full replacement set, never merged with the old tags.
#
#   Methods:
#   --------
#   - is_any_field_edited() -> bool
#   - apply_to(entry: MeetingEntry) -> MeetingEntry
#       Build the merged entry: present values win, absent
#       fields are taken from entry.
#
# ==============================================

from dataclasses import dataclass
from typing import Any, FrozenSet, Generic, TypeVar, Union

from linkytime.model.fields import (
    IsRecurring,
    MeetingDateTime,
    MeetingDuration,
    MeetingName,
    MeetingUrl,
    ModuleCode,
    Tag,
)
from linkytime.model.meeting_entry import MeetingEntry

T = TypeVar("T")


@dataclass(frozen=True)
class Present(Generic[T]):
    """A field value supplied by the user."""
    value: T


class _Absent:
    """Marker for a field the user did not supply."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()

FieldUpdate = Union[Present[T], _Absent]


def resolve(update: FieldUpdate, current: Any) -> Any:
    """
    Pick the value for one field of a merged entry.

    Args:
        update: Present(value) or ABSENT
        current: The field's existing value

    Returns:
        update.value if present, otherwise current
    """
    if isinstance(update, Present):
        return update.value
    if update is ABSENT:
        return current
    raise TypeError(f"Expected Present or ABSENT, got {update!r}")


@dataclass(frozen=True)
class EditDescriptor:
    """Fields to change on an existing meeting entry."""

    name: "FieldUpdate[MeetingName]" = ABSENT
    url: "FieldUpdate[MeetingUrl]" = ABSENT
    date_time: "FieldUpdate[MeetingDateTime]" = ABSENT
    duration: "FieldUpdate[MeetingDuration]" = ABSENT
    module: "FieldUpdate[ModuleCode]" = ABSENT
    is_recurring: "FieldUpdate[IsRecurring]" = ABSENT
    tags: "FieldUpdate[FrozenSet[Tag]]" = ABSENT

    def _updates(self) -> tuple:
        return (
            self.name, self.url, self.date_time, self.duration,
            self.module, self.is_recurring, self.tags,
        )

    def is_any_field_edited(self) -> bool:
        """Returns True if at least one field is present."""
        return any(isinstance(update, Present) for update in self._updates())

    def apply_to(self, entry: MeetingEntry) -> MeetingEntry:
        """
        Create the edited version of an entry.

        Args:
            entry: The entry being edited

        Returns:
            A new MeetingEntry; entry itself is untouched
        """
        return MeetingEntry(
            name=resolve(self.name, entry.name),
            url=resolve(self.url, entry.url),
            date_time=resolve(self.date_time, entry.date_time),
            duration=resolve(self.duration, entry.duration),
            module=resolve(self.module, entry.module),
            is_recurring=resolve(self.is_recurring, entry.is_recurring),
            tags=frozenset(resolve(self.tags, entry.tags)),
        )

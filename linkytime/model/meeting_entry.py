# ==============================================
# MeetingEntry
# ==============================================
#
# PURPOSE:
#   The aggregate for a single meeting record. Immutable: an
#   "edit" builds a brand new MeetingEntry and swaps it in.
#
# CLASS: MeetingEntry (frozen dataclass)
# --------------------------------------
#   Attributes:
#   -----------
#   - name: MeetingName
#   - url: MeetingUrl
#   - date_time: MeetingDateTime
#   - duration: MeetingDuration
#   - module: ModuleCode
#   - is_recurring: IsRecurring
#   - tags: frozenset[Tag]
#
#   Two entries are duplicates iff all seven fields are equal.
#   The generated __eq__ / __hash__ compare field by field, and
#   every field type is itself a value type.
#
# ==============================================

from dataclasses import dataclass, field
from typing import FrozenSet

from linkytime.model.fields import (
    IsRecurring,
    MeetingDateTime,
    MeetingDuration,
    MeetingName,
    MeetingUrl,
    ModuleCode,
    Tag,
)


@dataclass(frozen=True)
class MeetingEntry:
    """A single meeting record. Compared and hashed by value."""

    name: MeetingName
    url: MeetingUrl
    date_time: MeetingDateTime
    duration: MeetingDuration
    module: ModuleCode
    is_recurring: IsRecurring
    tags: FrozenSet[Tag] = field(default_factory=frozenset)

    def __post_init__(self):
        # Accept any iterable of tags but always hold a frozenset
        if not isinstance(self.tags, frozenset):
            object.__setattr__(self, "tags", frozenset(self.tags))

    def sorted_tags(self) -> list:
        """Tags ordered by label, for stable display and storage."""
        return sorted(self.tags, key=lambda tag: tag.value)

    def __str__(self) -> str:
        tags = "".join(f"[{tag}]" for tag in self.sorted_tags())
        return (
            f"{self.name}; URL: {self.url}; DateTime: {self.date_time}; "
            f"Duration: {self.duration}; Module: {self.module}; "
            f"Recurring: {self.is_recurring}; Tags: {tags}"
        )

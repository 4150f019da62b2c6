# ==============================================
# TOPIC 1: MODEL
# ==============================================
#
# This package holds the data LinkyTime manages:
#
# Modules:
# --------
# - fields.py         → Validated field value types
# - meeting_entry.py  → MeetingEntry aggregate
# - predicates.py     → Display predicates for the filtered views
# - collection.py     → MeetingCollection (entries + filtered views)
#
# ==============================================

from .fields import (
    IsRecurring,
    MeetingDateTime,
    MeetingDuration,
    MeetingName,
    MeetingUrl,
    ModuleCode,
    Tag,
)
from .meeting_entry import MeetingEntry
from .predicates import (
    PREDICATE_SHOW_ALL,
    ModuleContainsKeywordsPredicate,
    NameContainsKeywordsPredicate,
)
from .collection import MeetingCollection

__all__ = [
    "IsRecurring",
    "MeetingDateTime",
    "MeetingDuration",
    "MeetingName",
    "MeetingUrl",
    "ModuleCode",
    "Tag",
    "MeetingEntry",
    "PREDICATE_SHOW_ALL",
    "ModuleContainsKeywordsPredicate",
    "NameContainsKeywordsPredicate",
    "MeetingCollection",
]

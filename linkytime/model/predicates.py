"""
Display predicates used to narrow the filtered views of a MeetingCollection.
"""

from dataclasses import dataclass
from typing import Tuple

from linkytime.model.fields import ModuleCode
from linkytime.model.meeting_entry import MeetingEntry


def PREDICATE_SHOW_ALL(item) -> bool:
    """Default predicate: every entry (or module) is shown."""
    return True


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """
    Matches entries whose name contains any of the keywords as a whole word.
    Matching is case-insensitive.
    """
    keywords: Tuple[str, ...]

    def __call__(self, entry: MeetingEntry) -> bool:
        words = {word.lower() for word in entry.name.value.split()}
        return any(keyword.lower() in words for keyword in self.keywords)


@dataclass(frozen=True)
class ModuleContainsKeywordsPredicate:
    """Matches module codes containing any of the keywords (case-insensitive)."""
    keywords: Tuple[str, ...]

    def __call__(self, module: ModuleCode) -> bool:
        code = module.value.lower()
        return any(keyword.lower() in code for keyword in self.keywords)

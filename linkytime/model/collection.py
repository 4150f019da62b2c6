# ==============================================
# MeetingCollection
# ==============================================
#
# PURPOSE:
#   The in-session store of every MeetingEntry, plus the derived
#   views that commands look entries up against.
#
# WHY THIS CLASS EXISTS:
#   Index-based commands ("delete 2", "edit 1 n/...") refer to what
#   the user last SAW, not to the full list. The filtered view must
#   therefore track the full list exactly, restricted by the active
#   predicate, in the same order.
#
# CLASS: MeetingCollection
# ------------------------
#   Stateful — owns the ordered list of entries.
#
#   Invariant:
#   ----------
#   No two entries in the list are equal (all seven fields).
#   Enforced by add() and replace().
#
#   Methods:
#   --------
#   - has(entry) -> bool
#   - add(entry) -> None                 DuplicateEntryError
#   - remove(entry) -> None              EntryNotFoundError
#   - replace(old, new) -> None          EntryNotFoundError / DuplicateEntryError
#   - clear() -> None
#   - set_filter(predicate) -> None      recompute the filtered view now
#   - filtered_view() -> list[MeetingEntry]
#   - set_module_filter(predicate) -> None
#   - filtered_modules() -> list[ModuleCode]
#
#   View caching:
#   -------------
#   Each view is cached under (predicate, version). Every mutator
#   bumps _version, so the next read recomputes. Changing the
#   predicate recomputes immediately.
#
# ==============================================

from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from linkytime.exceptions import DuplicateEntryError, EntryNotFoundError
from linkytime.model.fields import ModuleCode
from linkytime.model.meeting_entry import MeetingEntry
from linkytime.model.predicates import PREDICATE_SHOW_ALL


class _CachedView:
    """An ordered, predicate-selected subset cached against a version counter."""

    def __init__(self, predicate: Callable):
        self.predicate = predicate
        self._items: List = []
        self._cached_predicate: Optional[Callable] = None
        self._cached_version = -1

    def is_stale(self, version: int) -> bool:
        return self._cached_version != version or self._cached_predicate is not self.predicate

    def refresh(self, source: Iterable, version: int) -> None:
        self._items = [item for item in source if self.predicate(item)]
        self._cached_predicate = self.predicate
        self._cached_version = version

    def items(self) -> List:
        return list(self._items)


class MeetingCollection:
    """
    Ordered, duplicate-free collection of meeting entries with
    a filtered entry view and a filtered module view.
    """

    def __init__(self, entries: Optional[Iterable[MeetingEntry]] = None):
        """
        Initialize the collection.

        Args:
            entries: Optional initial entries, added one by one so
                     duplicates are rejected exactly as at runtime
        """
        self._entries: List[MeetingEntry] = []
        self._version = 0
        self._entry_view = _CachedView(PREDICATE_SHOW_ALL)
        self._module_view = _CachedView(PREDICATE_SHOW_ALL)

        for entry in entries or ():
            self.add(entry)

    # ------------------------------------------
    # Queries
    # ------------------------------------------

    @property
    def entries(self) -> Tuple[MeetingEntry, ...]:
        """All entries in insertion order (read-only snapshot)."""
        return tuple(self._entries)

    @property
    def version(self) -> int:
        return self._version

    def has(self, entry: MeetingEntry) -> bool:
        """
        Check if an entry equal to the given one is stored.

        Args:
            entry: Entry to look for

        Returns:
            True if any stored entry is value-equal to entry
        """
        return entry in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[MeetingEntry]:
        return iter(tuple(self._entries))

    def __eq__(self, other) -> bool:
        if not isinstance(other, MeetingCollection):
            return NotImplemented
        return self._entries == other._entries

    # ------------------------------------------
    # Mutators
    # ------------------------------------------

    def add(self, entry: MeetingEntry) -> None:
        """
        Append an entry.

        Args:
            entry: Entry to append

        Raises:
            DuplicateEntryError: If an equal entry is already stored
        """
        if self.has(entry):
            raise DuplicateEntryError("This meeting already exists in LinkyTime")
        self._entries.append(entry)
        self._bump()

    def remove(self, entry: MeetingEntry) -> None:
        """
        Remove the first entry equal to the given one.

        Raises:
            EntryNotFoundError: If no equal entry is stored
        """
        try:
            self._entries.remove(entry)
        except ValueError:
            raise EntryNotFoundError("This meeting does not exist in LinkyTime")
        self._bump()

    def replace(self, old: MeetingEntry, new: MeetingEntry) -> None:
        """
        Swap old for new in place, keeping its position.

        Replacing an entry with an equal one is a legal no-op edit.

        Args:
            old: Entry currently stored
            new: Entry to put in its place

        Raises:
            EntryNotFoundError: If old is not stored
            DuplicateEntryError: If new equals some other stored entry
        """
        try:
            position = self._entries.index(old)
        except ValueError:
            raise EntryNotFoundError("This meeting does not exist in LinkyTime")

        if new != old and self.has(new):
            raise DuplicateEntryError("This meeting already exists in LinkyTime")

        self._entries[position] = new
        self._bump()

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()
        self._bump()

    # ------------------------------------------
    # Filtered views
    # ------------------------------------------

    def set_filter(self, predicate: Callable[[MeetingEntry], bool]) -> None:
        """
        Replace the entry predicate and recompute the filtered view.

        Args:
            predicate: Callable taking a MeetingEntry; PREDICATE_SHOW_ALL resets
        """
        self._entry_view.predicate = predicate
        self._entry_view.refresh(self._entries, self._version)

    def filtered_view(self) -> List[MeetingEntry]:
        """
        Get the entries matching the active predicate.

        Returns:
            Matching entries in collection order
        """
        if self._entry_view.is_stale(self._version):
            self._entry_view.refresh(self._entries, self._version)
        return self._entry_view.items()

    def set_module_filter(self, predicate: Callable[[ModuleCode], bool]) -> None:
        """Replace the module predicate and recompute the module view."""
        self._module_view.predicate = predicate
        self._module_view.refresh(self._distinct_modules(), self._version)

    def filtered_modules(self) -> List[ModuleCode]:
        """Distinct module codes (first-appearance order) matching the module predicate."""
        if self._module_view.is_stale(self._version):
            self._module_view.refresh(self._distinct_modules(), self._version)
        return self._module_view.items()

    def _distinct_modules(self) -> List[ModuleCode]:
        seen = {}
        for entry in self._entries:
            seen.setdefault(entry.module, None)
        return list(seen)

    def _bump(self) -> None:
        self._version += 1

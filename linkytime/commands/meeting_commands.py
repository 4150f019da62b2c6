# ==============================================
# Meeting Entry Commands
# ==============================================
#
# PURPOSE:
#   Commands that act on meeting entries: add, delete, edit,
#   list, open and find.
#
# CONTRACT (every command):
# -------------------------
#   - COMMAND_WORD: str       → word that selects the command
#   - MESSAGE_USAGE: str      → shown when the arguments are wrong
#   - execute(collection: MeetingCollection) -> CommandResult
#       Raises CommandError when the command cannot be carried out
#       against the current state of the collection.
#
# INDEXES:
# --------
#   Index arguments point into collection.filtered_view(), i.e. the
#   list the user last saw, never into the full collection.
#
# ==============================================

from dataclasses import dataclass, field
from typing import ClassVar

from linkytime.commands.descriptor import EditDescriptor
from linkytime.commands.index import Index
from linkytime.commands.result import CommandResult
from linkytime.exceptions import CommandError, DuplicateEntryError
from linkytime.messages import (
    MESSAGE_INVALID_MEETING_DISPLAYED_INDEX,
    MESSAGE_MEETINGS_LISTED_OVERVIEW,
)
from linkytime.model.collection import MeetingCollection
from linkytime.model.meeting_entry import MeetingEntry
from linkytime.model.predicates import PREDICATE_SHOW_ALL, NameContainsKeywordsPredicate
from linkytime.parser.syntax import (
    PREFIX_DATETIME,
    PREFIX_DURATION,
    PREFIX_MODULE,
    PREFIX_NAME,
    PREFIX_RECURRING,
    PREFIX_TAG,
    PREFIX_URL,
)

MESSAGE_DUPLICATE_MEETING = "This meeting already exists in LinkyTime."


def entry_at(collection: MeetingCollection, index: Index) -> MeetingEntry:
    """
    Look up an entry in the filtered view.

    Raises:
        CommandError: If index is outside the filtered view
    """
    shown = collection.filtered_view()
    if index.zero_based < 0 or index.zero_based >= len(shown):
        raise CommandError(MESSAGE_INVALID_MEETING_DISPLAYED_INDEX)
    return shown[index.zero_based]


@dataclass(frozen=True)
class AddCommand:
    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Adds a meeting to LinkyTime. "
        f"Parameters: "
        f"{PREFIX_NAME}NAME "
        f"{PREFIX_URL}URL "
        f"{PREFIX_DATETIME}DATETIME "
        f"{PREFIX_DURATION}DURATION "
        f"{PREFIX_MODULE}MODULE "
        f"{PREFIX_RECURRING}IS_RECURRING "
        f"[{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} "
        f"{PREFIX_NAME}CS2103 Lecture "
        f"{PREFIX_URL}https://nus-sg.zoom.us/j/123456 "
        f"{PREFIX_DATETIME}25-12-2021 1400 "
        f"{PREFIX_DURATION}2 "
        f"{PREFIX_MODULE}CS2103 "
        f"{PREFIX_RECURRING}Y "
        f"{PREFIX_TAG}Lecture"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New meeting added: {}"

    entry: MeetingEntry

    def execute(self, collection: MeetingCollection) -> CommandResult:
        if collection.has(self.entry):
            raise CommandError(MESSAGE_DUPLICATE_MEETING)
        collection.add(self.entry)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.entry))


@dataclass(frozen=True)
class DeleteCommand:
    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Deletes the meeting identified by the index number "
        f"used in the displayed meeting list.\n"
        f"Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted meeting: {}"

    index: Index

    def execute(self, collection: MeetingCollection) -> CommandResult:
        target = entry_at(collection, self.index)
        collection.remove(target)
        return CommandResult(self.MESSAGE_SUCCESS.format(target))


@dataclass(frozen=True)
class EditCommand:
    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Edits the details of the meeting identified "
        f"by the index number used in the displayed list. "
        f"Existing values will be overwritten by the input values.\n"
        f"Parameters: INDEX (must be a positive integer) "
        f"[{PREFIX_NAME}NAME] "
        f"[{PREFIX_URL}URL] "
        f"[{PREFIX_DATETIME}DATETIME] "
        f"[{PREFIX_DURATION}DURATION] "
        f"[{PREFIX_MODULE}MODULE] "
        f"[{PREFIX_RECURRING}IS_RECURRING] "
        f"[{PREFIX_TAG}TAG]...\n"
        f"Example: {COMMAND_WORD} 1 {PREFIX_NAME}Tutorial {PREFIX_DURATION}1.0"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Edited meeting: {}"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."

    index: Index
    descriptor: EditDescriptor = field(default_factory=EditDescriptor)

    def execute(self, collection: MeetingCollection) -> CommandResult:
        if not self.descriptor.is_any_field_edited():
            raise CommandError(self.MESSAGE_NOT_EDITED)

        target = entry_at(collection, self.index)
        edited = self.descriptor.apply_to(target)

        # An edit that changes nothing is always allowed; only a changed
        # entry can collide with some other entry.
        if edited != target and collection.has(edited):
            raise CommandError(MESSAGE_DUPLICATE_MEETING)

        try:
            collection.replace(target, edited)
        except DuplicateEntryError:
            raise CommandError(MESSAGE_DUPLICATE_MEETING)

        collection.set_filter(PREDICATE_SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited))


@dataclass(frozen=True)
class ListCommand:
    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Lists all meetings.\n"
        f"Example: {COMMAND_WORD}"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all meetings"

    def execute(self, collection: MeetingCollection) -> CommandResult:
        collection.set_filter(PREDICATE_SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class OpenCommand:
    COMMAND_WORD: ClassVar[str] = "open"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Opens the link of the meeting identified by the index "
        f"number used in the displayed meeting list.\n"
        f"Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Opened meeting: {} ({})"

    index: Index

    def execute(self, collection: MeetingCollection) -> CommandResult:
        target = entry_at(collection, self.index)
        url = str(target.url)
        return CommandResult(self.MESSAGE_SUCCESS.format(target.name, url), url=url)


@dataclass(frozen=True)
class FindCommand:
    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Finds all meetings whose names contain any of "
        f"the specified keywords (case-insensitive) and displays them as a list.\n"
        f"Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} lecture tutorial"
    )

    predicate: NameContainsKeywordsPredicate

    def execute(self, collection: MeetingCollection) -> CommandResult:
        collection.set_filter(self.predicate)
        return CommandResult(MESSAGE_MEETINGS_LISTED_OVERVIEW.format(len(collection.filtered_view())))

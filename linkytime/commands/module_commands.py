# ==============================================
# Module Commands
# ==============================================
#
# PURPOSE:
#   Commands that act on the module list: listmod, findmod and
#   deletemod.
#
#   Modules are not stored on their own. The module list is the
#   distinct module codes of the stored entries, so deleting a
#   module deletes every meeting that belongs to it.
#
# INDEXES:
# --------
#   deletemod INDEX points into collection.filtered_modules(), the
#   module list the user last saw.
#
# ==============================================

from dataclasses import dataclass
from typing import ClassVar

from linkytime.commands.index import Index
from linkytime.commands.result import CommandResult
from linkytime.exceptions import CommandError
from linkytime.messages import (
    MESSAGE_INVALID_MODULE_DISPLAYED_INDEX,
    MESSAGE_MODULES_LISTED_OVERVIEW,
)
from linkytime.model.collection import MeetingCollection
from linkytime.model.fields import ModuleCode
from linkytime.model.predicates import PREDICATE_SHOW_ALL, ModuleContainsKeywordsPredicate


def module_at(collection: MeetingCollection, index: Index) -> ModuleCode:
    """
    Look up a module in the filtered module list.

    Raises:
        CommandError: If index is outside the filtered module list
    """
    shown = collection.filtered_modules()
    if index.zero_based < 0 or index.zero_based >= len(shown):
        raise CommandError(MESSAGE_INVALID_MODULE_DISPLAYED_INDEX)
    return shown[index.zero_based]


@dataclass(frozen=True)
class ListModuleCommand:
    """Shows every module that has at least one meeting."""

    COMMAND_WORD: ClassVar[str] = "listmod"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Lists all modules.\n"
        f"Example: {COMMAND_WORD}"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all modules"

    def execute(self, collection: MeetingCollection) -> CommandResult:
        collection.set_module_filter(PREDICATE_SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class FindModuleCommand:
    """Narrows the module list to codes containing any keyword."""

    COMMAND_WORD: ClassVar[str] = "findmod"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Finds all modules whose codes contain any of "
        f"the specified keywords (case-insensitive).\n"
        f"Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} CS2103"
    )

    predicate: ModuleContainsKeywordsPredicate

    def execute(self, collection: MeetingCollection) -> CommandResult:
        collection.set_module_filter(self.predicate)
        return CommandResult(MESSAGE_MODULES_LISTED_OVERVIEW.format(len(collection.filtered_modules())))


@dataclass(frozen=True)
class DeleteModuleCommand:
    COMMAND_WORD: ClassVar[str] = "deletemod"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Deletes the module identified by the index number "
        f"used in the displayed module list, together with all of its meetings.\n"
        f"Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted module: {} ({} meetings removed)"

    index: Index

    def execute(self, collection: MeetingCollection) -> CommandResult:
        module = module_at(collection, self.index)
        doomed = [entry for entry in collection.entries if entry.module == module]
        for entry in doomed:
            collection.remove(entry)
        return CommandResult(self.MESSAGE_SUCCESS.format(module, len(doomed)))

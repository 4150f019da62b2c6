from dataclasses import dataclass
from typing import ClassVar

from linkytime.commands.result import CommandResult
from linkytime.model.collection import MeetingCollection
from linkytime.model.predicates import PREDICATE_SHOW_ALL


@dataclass(frozen=True)
class ClearCommand:
    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Deletes every meeting in LinkyTime.\n"
        f"Example: {COMMAND_WORD}"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "LinkyTime has been cleared!"

    def execute(self, collection: MeetingCollection) -> CommandResult:
        collection.clear()
        collection.set_filter(PREDICATE_SHOW_ALL)
        collection.set_module_filter(PREDICATE_SHOW_ALL)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class HelpCommand:
    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Shows program usage instructions.\n"
        f"Example: {COMMAND_WORD}"
    )
    SHOWING_HELP_MESSAGE: ClassVar[str] = "Available commands:"

    def execute(self, collection: MeetingCollection) -> CommandResult:
        # Imported here: the command table depends on this module
        from linkytime.commands import COMMAND_TYPES

        usages = "\n\n".join(command_type.MESSAGE_USAGE for command_type in COMMAND_TYPES)
        return CommandResult(f"{self.SHOWING_HELP_MESSAGE}\n\n{usages}", show_help=True)


@dataclass(frozen=True)
class ExitCommand:
    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Saves and exits LinkyTime.\n"
        f"Example: {COMMAND_WORD}"
    )
    MESSAGE_EXIT_ACKNOWLEDGEMENT: ClassVar[str] = "Exiting LinkyTime as requested ..."

    def execute(self, collection: MeetingCollection) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)

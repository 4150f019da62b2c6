# ==============================================
# TOPIC 2: COMMANDS
# ==============================================
#
# One frozen dataclass per user action. The set is closed:
# COMMAND_TYPES lists every variant and the parser builds its
# dispatch table from it.
#
# Modules:
# --------
# - result.py           → CommandResult
# - index.py            → Index (1-based for users, 0-based inside)
# - descriptor.py       → EditDescriptor with Present / ABSENT fields
# - meeting_commands.py → add, delete, edit, list, open, find
# - module_commands.py  → listmod, findmod, deletemod
# - system_commands.py  → clear, help, exit
#
# ==============================================

from typing import Union, get_args

from .result import CommandResult
from .index import Index
from .descriptor import ABSENT, EditDescriptor, Present
from .meeting_commands import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    FindCommand,
    ListCommand,
    OpenCommand,
)
from .module_commands import DeleteModuleCommand, FindModuleCommand, ListModuleCommand
from .system_commands import ClearCommand, ExitCommand, HelpCommand

Command = Union[
    AddCommand,
    DeleteCommand,
    EditCommand,
    ListCommand,
    OpenCommand,
    FindCommand,
    ListModuleCommand,
    FindModuleCommand,
    DeleteModuleCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
]

COMMAND_TYPES = get_args(Command)

# Commands whose execution can change the stored entries
MUTATING_COMMANDS = (AddCommand, DeleteCommand, EditCommand, DeleteModuleCommand, ClearCommand)

__all__ = [
    "CommandResult",
    "Index",
    "ABSENT",
    "EditDescriptor",
    "Present",
    "AddCommand",
    "DeleteCommand",
    "EditCommand",
    "FindCommand",
    "ListCommand",
    "OpenCommand",
    "DeleteModuleCommand",
    "FindModuleCommand",
    "ListModuleCommand",
    "ClearCommand",
    "ExitCommand",
    "HelpCommand",
    "Command",
    "COMMAND_TYPES",
    "MUTATING_COMMANDS",
]

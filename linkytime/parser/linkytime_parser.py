# ==============================================
# LinkyTimeParser
# ==============================================
#
# PURPOSE:
#   Entry point of the parser topic. Splits a line of input into
#   a command word and its arguments, then hands the arguments to
#   the right sub-parser.
#
# CLASS: LinkyTimeParser
# ----------------------
#   Stateless — the dispatch table is built once per instance.
#
#   Methods:
#   --------
#   - parse_command(user_input: str) -> Command
#       Raises ParseFormatError if the input is blank, and
#       UnknownCommandError if the command word is not known.
#
#   Dispatch table:
#   ---------------
#   Built from COMMAND_TYPES, the closed set of commands. Building
#   fails if a command has no parser or a parser has no command.
#
# ==============================================

import re
from typing import Callable, Dict

from linkytime.commands import (
    COMMAND_TYPES,
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    DeleteModuleCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    FindModuleCommand,
    HelpCommand,
    ListCommand,
    ListModuleCommand,
    OpenCommand,
)
from linkytime.exceptions import ParseFormatError, UnknownCommandError
from linkytime.messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND
from linkytime.parser.command_parsers import (
    AddCommandParser,
    DeleteCommandParser,
    DeleteModuleCommandParser,
    EditCommandParser,
    FindCommandParser,
    FindModuleCommandParser,
    OpenCommandParser,
)

# Used for initial separation of command word and args
BASIC_COMMAND_FORMAT = re.compile(r'(?P<command_word>\S+)(?P<arguments>.*)', re.DOTALL)


def _no_arguments(command_type) -> Callable[[str], Command]:
    # Trailing text after an argument-free command word is ignored
    return lambda arguments: command_type()


def _build_dispatch_table() -> Dict[str, Callable[[str], Command]]:
    table = {
        # Meeting entry commands
        AddCommand.COMMAND_WORD: AddCommandParser().parse,
        DeleteCommand.COMMAND_WORD: DeleteCommandParser().parse,
        EditCommand.COMMAND_WORD: EditCommandParser().parse,
        ListCommand.COMMAND_WORD: _no_arguments(ListCommand),
        OpenCommand.COMMAND_WORD: OpenCommandParser().parse,
        FindCommand.COMMAND_WORD: FindCommandParser().parse,

        # Module commands
        ListModuleCommand.COMMAND_WORD: _no_arguments(ListModuleCommand),
        FindModuleCommand.COMMAND_WORD: FindModuleCommandParser().parse,
        DeleteModuleCommand.COMMAND_WORD: DeleteModuleCommandParser().parse,

        # System commands
        ClearCommand.COMMAND_WORD: _no_arguments(ClearCommand),
        HelpCommand.COMMAND_WORD: _no_arguments(HelpCommand),
        ExitCommand.COMMAND_WORD: _no_arguments(ExitCommand),
    }

    expected = {command_type.COMMAND_WORD for command_type in COMMAND_TYPES}
    if set(table) != expected:
        raise RuntimeError(
            f"Parser dispatch table out of sync with commands: "
            f"missing {sorted(expected - set(table))}, extra {sorted(set(table) - expected)}"
        )
    return table


class LinkyTimeParser:
    """Parses user input."""

    def __init__(self):
        self._dispatch = _build_dispatch_table()

    def parse_command(self, user_input: str) -> Command:
        """
        Parse user input into a command for execution.

        Args:
            user_input: Full line typed by the user

        Returns:
            The validated command

        Raises:
            ParseFormatError: If the input does not have the expected shape
            UnknownCommandError: If the command word is not recognised
        """
        match = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if not match:
            raise ParseFormatError(
                MESSAGE_INVALID_COMMAND_FORMAT.format(HelpCommand.MESSAGE_USAGE),
                usage=HelpCommand.MESSAGE_USAGE
            )

        command_word = match.group("command_word")
        arguments = match.group("arguments")

        parse = self._dispatch.get(command_word)
        if parse is None:
            raise UnknownCommandError(MESSAGE_UNKNOWN_COMMAND)
        return parse(arguments)

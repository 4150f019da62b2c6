# ==============================================
# Command Parsers
# ==============================================
#
# PURPOSE:
#   One parser per command that takes arguments. Each parser:
#     1. tokenizes the arguments (tokenizer.tokenize)
#     2. builds field value types (parser_util)
#     3. returns the validated command
#
# ERRORS:
# -------
#   Everything that goes wrong is raised as ParseFormatError with
#   the command's MESSAGE_USAGE attached:
#     - wrong shape (missing prefix, bad index, stray preamble)
#         → "Invalid command format! \n<usage>"
#     - a field value failing its constraint
#         → the constraint message
#
# ==============================================

from typing import Callable, TypeVar

from linkytime.commands.descriptor import ABSENT, EditDescriptor, Present
from linkytime.commands.meeting_commands import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    FindCommand,
    OpenCommand,
)
from linkytime.commands.module_commands import DeleteModuleCommand, FindModuleCommand
from linkytime.exceptions import ParseFormatError, ValidationError
from linkytime.messages import MESSAGE_INVALID_COMMAND_FORMAT
from linkytime.model.meeting_entry import MeetingEntry
from linkytime.model.predicates import ModuleContainsKeywordsPredicate, NameContainsKeywordsPredicate
from linkytime.parser import parser_util
from linkytime.parser.syntax import (
    KNOWN_PREFIXES,
    PREFIX_DATETIME,
    PREFIX_DURATION,
    PREFIX_MODULE,
    PREFIX_NAME,
    PREFIX_RECURRING,
    PREFIX_TAG,
    PREFIX_URL,
)
from linkytime.parser.tokenizer import ArgumentMultimap, tokenize

T = TypeVar("T")


def invalid_format(usage: str) -> ParseFormatError:
    return ParseFormatError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage), usage=usage)


def _with_usage(usage: str, build: Callable[[], T]) -> T:
    """Run build(), reporting field constraint failures with the command's usage."""
    try:
        return build()
    except ValidationError as e:
        raise ParseFormatError(str(e), usage=usage)


class AddCommandParser:
    REQUIRED_PREFIXES = (
        PREFIX_NAME,
        PREFIX_URL,
        PREFIX_DATETIME,
        PREFIX_DURATION,
        PREFIX_MODULE,
        PREFIX_RECURRING,
    )

    def parse(self, args: str) -> AddCommand:
        """
        Parse the arguments of an add command.

        Raises:
            ParseFormatError: If a required prefix is missing, there is a
                              preamble, or a field value is invalid
        """
        multimap = tokenize(args, *KNOWN_PREFIXES)
        usage = AddCommand.MESSAGE_USAGE

        if multimap.preamble or not all(multimap.has(prefix) for prefix in self.REQUIRED_PREFIXES):
            raise invalid_format(usage)

        entry = _with_usage(usage, lambda: MeetingEntry(
            name=parser_util.parse_name(multimap.get_value(PREFIX_NAME)),
            url=parser_util.parse_url(multimap.get_value(PREFIX_URL)),
            date_time=parser_util.parse_date_time(multimap.get_value(PREFIX_DATETIME)),
            duration=parser_util.parse_duration(multimap.get_value(PREFIX_DURATION)),
            module=parser_util.parse_module(multimap.get_value(PREFIX_MODULE)),
            is_recurring=parser_util.parse_is_recurring(multimap.get_value(PREFIX_RECURRING)),
            tags=parser_util.parse_tags(multimap.get_all_values(PREFIX_TAG)),
        ))
        return AddCommand(entry)


class DeleteCommandParser:
    def parse(self, args: str) -> DeleteCommand:
        try:
            return DeleteCommand(parser_util.parse_index(args))
        except ParseFormatError:
            raise invalid_format(DeleteCommand.MESSAGE_USAGE)


class OpenCommandParser:
    def parse(self, args: str) -> OpenCommand:
        try:
            return OpenCommand(parser_util.parse_index(args))
        except ParseFormatError:
            raise invalid_format(OpenCommand.MESSAGE_USAGE)


class EditCommandParser:
    """
    Parses "edit INDEX [n/NAME] [u/URL] ... [t/TAG]...".

    An edit with no fields parses fine and is rejected when executed.
    A single empty "t/" removes every tag.
    """

    def parse(self, args: str) -> EditCommand:
        multimap = tokenize(args, *KNOWN_PREFIXES)
        usage = EditCommand.MESSAGE_USAGE

        try:
            index = parser_util.parse_index(multimap.preamble)
        except ParseFormatError:
            raise invalid_format(usage)

        descriptor = _with_usage(usage, lambda: self._build_descriptor(multimap))
        return EditCommand(index, descriptor)

    def _build_descriptor(self, multimap: ArgumentMultimap) -> EditDescriptor:
        def single(prefix, parse):
            if not multimap.has(prefix):
                return ABSENT
            return Present(parse(multimap.get_value(prefix)))

        return EditDescriptor(
            name=single(PREFIX_NAME, parser_util.parse_name),
            url=single(PREFIX_URL, parser_util.parse_url),
            date_time=single(PREFIX_DATETIME, parser_util.parse_date_time),
            duration=single(PREFIX_DURATION, parser_util.parse_duration),
            module=single(PREFIX_MODULE, parser_util.parse_module),
            is_recurring=single(PREFIX_RECURRING, parser_util.parse_is_recurring),
            tags=self._tags_update(multimap),
        )

    def _tags_update(self, multimap: ArgumentMultimap):
        if not multimap.has(PREFIX_TAG):
            return ABSENT
        values = multimap.get_all_values(PREFIX_TAG)
        if values == [""]:
            return Present(frozenset())
        return Present(parser_util.parse_tags(values))


class FindCommandParser:
    def parse(self, args: str) -> FindCommand:
        keywords = tuple(args.split())
        if not keywords:
            raise invalid_format(FindCommand.MESSAGE_USAGE)
        return FindCommand(NameContainsKeywordsPredicate(keywords))


class DeleteModuleCommandParser:
    def parse(self, args: str) -> DeleteModuleCommand:
        try:
            return DeleteModuleCommand(parser_util.parse_index(args))
        except ParseFormatError:
            raise invalid_format(DeleteModuleCommand.MESSAGE_USAGE)


class FindModuleCommandParser:
    def parse(self, args: str) -> FindModuleCommand:
        keywords = tuple(args.split())
        if not keywords:
            raise invalid_format(FindModuleCommand.MESSAGE_USAGE)
        return FindModuleCommand(ModuleContainsKeywordsPredicate(keywords))

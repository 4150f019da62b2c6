# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Provides a command-line interface to a LinkyTime session.
#   This is how users interact with the system.
#
# USAGE:
# ------
# 1. Interactive session (type commands, "exit" to save and quit):
#    python -m linkytime.cli
#
# 2. Run a single command and save:
#    python -m linkytime.cli -c "add n/CS2103 Lecture u/https://nus-sg.zoom.us/j/1 d/25-12-2021 1400 dur/2 m/CS2103 r/Y"
#
# 3. Use another data file / backend:
#    python -m linkytime.cli --data-file ~/linkytime.json
#    python -m linkytime.cli --backend mongo
#
# IMPLEMENTATION:
# ---------------
# - Uses argparse for CLI parsing
# - Instantiates LogicManager
# - Prints feedback and the current filtered list after each command
# - Hands "open" URLs to the web browser
#
# ==============================================

import argparse
import sys
import webbrowser
from dataclasses import replace
from typing import Optional, TextIO

from linkytime.commands import (
    CommandResult,
    DeleteModuleCommand,
    FindModuleCommand,
    ListModuleCommand,
)
from linkytime.config import SUPPORTED_BACKENDS, AppConfig, get_config
from linkytime.exceptions import LinkyTimeError, ParseFormatError, PersistenceError
from linkytime.logic import LogicManager

PROMPT = "linkytime> "

# After these the module list is shown instead of the meeting list
MODULE_VIEW_WORDS = (
    ListModuleCommand.COMMAND_WORD,
    FindModuleCommand.COMMAND_WORD,
    DeleteModuleCommand.COMMAND_WORD,
)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linkytime",
        description="Manage meeting links from the command line."
    )
    parser.add_argument("--data-file", help="JSON data file (json backend)")
    parser.add_argument("--backend", choices=SUPPORTED_BACKENDS, help="Storage backend")
    parser.add_argument("--autosave", action="store_true", help="Save after every change")
    parser.add_argument("-c", "--command", help="Run one command, save and exit")
    return parser


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return a copy of config with command line flags applied."""
    storage = config.storage
    if args.data_file:
        storage = replace(storage, data_file=args.data_file)
    if args.backend:
        storage = replace(storage, backend=args.backend)
    if args.autosave:
        storage = replace(storage, autosave=True)
    return replace(config, storage=storage)


def render_entries(logic: LogicManager, out: TextIO) -> None:
    entries = logic.get_filtered_entries()
    if not entries:
        print("  (no meetings)", file=out)
    for position, entry in enumerate(entries, start=1):
        print(f"  {position}. {entry}", file=out)


def render_modules(logic: LogicManager, out: TextIO) -> None:
    for position, module in enumerate(logic.get_filtered_modules(), start=1):
        print(f"  {position}. {module}", file=out)


def handle_line(logic: LogicManager, line: str, config: AppConfig, out: TextIO) -> Optional[CommandResult]:
    """
    Execute one input line and print the outcome.

    Returns:
        The CommandResult, or None if the command failed
    """
    try:
        result = logic.execute(line)
    except ParseFormatError as e:
        print(f"✗ {e}", file=out)
        if e.usage and e.usage not in str(e):
            print(e.usage, file=out)
        return None
    except LinkyTimeError as e:
        print(f"✗ {e}", file=out)
        return None

    print(result.feedback, file=out)
    if result.exit or result.show_help:
        return result

    if result.url and config.open_links_in_browser:
        if not webbrowser.open(result.url):
            print("⚠ No browser available, open the link manually", file=out)

    command_word = line.split(maxsplit=1)[0]
    if command_word in MODULE_VIEW_WORDS:
        render_modules(logic, out)
    else:
        render_entries(logic, out)
    return result


def run_repl(logic: LogicManager, config: AppConfig, stdin: TextIO, out: TextIO) -> None:
    while True:
        print(PROMPT, end="", file=out, flush=True)
        line = stdin.readline()
        if not line:
            # End of input behaves like "exit"
            print(file=out)
            return
        if not line.strip():
            continue
        result = handle_line(logic, line, config, out)
        if result is not None and result.exit:
            return


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        config = apply_overrides(get_config(), args)
    except ValueError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    try:
        logic = LogicManager(config)
    except PersistenceError as e:
        print(f"✗ Could not load LinkyTime data: {e}", file=sys.stderr)
        return 1

    exit_code = 0
    try:
        if args.command:
            handle_line(logic, args.command, config, sys.stdout)
        else:
            print("✓ LinkyTime ready. Type 'help' for commands, 'exit' to quit.")
            render_entries(logic, sys.stdout)
            run_repl(logic, config, sys.stdin, sys.stdout)
    finally:
        try:
            logic.close()
        except PersistenceError as e:
            print(f"✗ Could not save LinkyTime data: {e}", file=sys.stderr)
            exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())

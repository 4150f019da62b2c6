# ==============================================
# TOPIC 3: PARSER
# ==============================================
#
# This package turns a line of user input into a validated
# command object.
#
# Modules:
# --------
# - syntax.py           → Argument prefixes (n/, u/, d/, dur/, m/, r/, t/)
# - tokenizer.py        → Split arguments into preamble + prefix values
# - parser_util.py      → Raw text → Index / field value types
# - command_parsers.py  → One sub-parser per argument-bearing command
# - linkytime_parser.py → Command word dispatch (entry point)
#
# Import LinkyTimeParser from linkytime.parser.linkytime_parser.
#
# ==============================================

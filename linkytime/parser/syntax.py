"""
Argument prefixes understood by the command parsers.
"""

PREFIX_NAME = "n/"
PREFIX_URL = "u/"
PREFIX_DATETIME = "d/"
PREFIX_DURATION = "dur/"
PREFIX_MODULE = "m/"
PREFIX_RECURRING = "r/"
PREFIX_TAG = "t/"

KNOWN_PREFIXES = (
    PREFIX_NAME,
    PREFIX_URL,
    PREFIX_DATETIME,
    PREFIX_DURATION,
    PREFIX_MODULE,
    PREFIX_RECURRING,
    PREFIX_TAG,
)

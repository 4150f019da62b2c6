# ==============================================
# ArgumentTokenizer
# ==============================================
#
# PURPOSE:
#   Split the argument part of a command into a preamble and
#   prefix/value pairs:
#     " 2 n/CS2103 Lecture t/Online t/Week3"
#       preamble → "2"
#       n/       → ["CS2103 Lecture"]
#       t/       → ["Online", "Week3"]
#
# RULES:
# ------
#   1. A prefix marker is one of the prefixes the caller asked for,
#      at the start of the arguments or after whitespace ("u/" inside
#      a URL is not one).
#   2. A value runs until the next marker and is stripped.
#   3. Any other "word/" is plain text and stays in the value around
#      it: "n/Consult w/ Prof" is the name "Consult w/ Prof".
#   4. Repeated prefixes keep every value in order; single-valued
#      fields read the last one.
#
# ==============================================

import re
from typing import Dict, List, Optional

def _marker_pattern(prefixes) -> "re.Pattern":
    # Longest first so a short prefix never shadows a longer one
    alternatives = "|".join(re.escape(prefix) for prefix in sorted(prefixes, key=len, reverse=True))
    return re.compile(rf'(?<!\S)({alternatives})')


class ArgumentMultimap:
    """Prefix → values mapping produced by tokenize()."""

    def __init__(self, preamble: str = ""):
        self.preamble = preamble
        self._values: Dict[str, List[str]] = {}

    def put(self, prefix: str, value: str) -> None:
        self._values.setdefault(prefix, []).append(value)

    def has(self, prefix: str) -> bool:
        return prefix in self._values

    def get_value(self, prefix: str) -> Optional[str]:
        """Last value given for prefix, or None if it never appeared."""
        values = self._values.get(prefix)
        return values[-1] if values else None

    def get_all_values(self, prefix: str) -> List[str]:
        return list(self._values.get(prefix, []))


def tokenize(args: str, *prefixes: str) -> ArgumentMultimap:
    """
    Tokenize an argument string.

    Args:
        args: Everything after the command word
        prefixes: Prefixes to split on; any other text is part of a value

    Returns:
        ArgumentMultimap with the stripped preamble and prefix values
    """
    if not prefixes:
        return ArgumentMultimap(args.strip())

    markers = list(_marker_pattern(prefixes).finditer(args))
    preamble = args[:markers[0].start()] if markers else args
    multimap = ArgumentMultimap(preamble.strip())

    for position, marker in enumerate(markers):
        end = markers[position + 1].start() if position + 1 < len(markers) else len(args)
        multimap.put(marker.group(1), args[marker.end():end].strip())

    return multimap

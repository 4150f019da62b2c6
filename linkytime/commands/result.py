from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a successfully executed command.

    The presentation layer shows feedback and re-renders the
    filtered list; show_help, exit and url are extra instructions.
    """
    feedback: str
    show_help: bool = False
    exit: bool = False
    url: Optional[str] = None

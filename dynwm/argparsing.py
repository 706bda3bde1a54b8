"""Short-option parsing in the style of the classic suckless argument macros."""

from __future__ import annotations

from collections import deque
from typing import Iterable


class UsageError(Exception):
    """Raised when the command line cannot be parsed."""

    def __init__(self, flag: str | None = None, message: str | None = None) -> None:
        self.flag = flag
        if message is None:
            message = f"option requires an argument -- {flag}" if flag else "usage error"
        super().__init__(message)


def parse_flags(
    argv: Iterable[str], with_argument: str = ""
) -> tuple[list[tuple[str, str | None]], list[str]]:
    """Split ``argv`` (without the program name) into flags and operands.

    Flags may be grouped (``-ab``). A flag listed in ``with_argument`` takes
    the rest of its word, or the following word, as its value. Parsing stops
    at the first word that is not a flag; a lone ``--`` is consumed and ends
    parsing, and a lone ``-`` is an operand.
    """
    pending = deque(argv)
    flags: list[tuple[str, str | None]] = []
    while pending and pending[0].startswith("-") and len(pending[0]) > 1:
        word = pending.popleft()
        if word == "--":
            break
        for pos, flag in enumerate(word[1:], start=1):
            if flag in with_argument:
                value = word[pos + 1:]
                if not value:
                    if not pending:
                        raise UsageError(flag)
                    value = pending.popleft()
                flags.append((flag, value))
                break
            flags.append((flag, None))
    return flags, list(pending)
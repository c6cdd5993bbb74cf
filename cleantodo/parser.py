"""Parsing of lines typed at the interactive prompt."""

import re
from typing import NamedTuple

# A single word followed by one quoted argument; embedded quotes are not escapable.
_QUOTED_PATTERNS = (
    re.compile(r'^(\w+)\s+"([^"]+)"$'),
    re.compile(r"^(\w+)\s+'([^']+)'$"),
)


class ParsedInput(NamedTuple):
    """A command name (lowercased) and its arguments."""

    command: str
    args: list[str]


def parse_input(line: str) -> ParsedInput:
    """Split an interactive line into a command and its arguments.

    ``add "buy milk"`` keeps the quoted text as one argument; anything
    else is split on whitespace. Blank input gives an empty command.
    """
    trimmed = line.strip()
    if not trimmed:
        return ParsedInput("", [])

    for pattern in _QUOTED_PATTERNS:
        match = pattern.match(trimmed)
        if match:
            return ParsedInput(match.group(1).lower(), [match.group(2)])

    parts = trimmed.split()
    return ParsedInput(parts[0].lower(), parts[1:])

"""Small parsing helpers shared by the day modules.

Every helper fails fast with a ParseError naming the offending text.
"""

from .errors import ParseError


def lines_of(text: str) -> list[str]:
    """Trim trailing whitespace, then split on line feeds.

    A carriage return before the line feed is dropped; no other character
    ends a line.
    """
    text = text.rstrip()
    if not text:
        return []
    return [line.removesuffix("\r") for line in text.split("\n")]


def strip_prefix(s: str, prefix: str) -> str:
    """Return s without prefix, or raise if s does not start with it."""
    if not s.startswith(prefix):
        raise ParseError(f"Expected {prefix!r} at start of {s!r}")
    return s[len(prefix) :]


def split_once(s: str, separator: str) -> tuple[str, str]:
    """Split s around the first separator, or raise if it is absent."""
    head, found, tail = s.partition(separator)
    if not found:
        raise ParseError(f"Expected {separator!r} in {s!r}")
    return head, tail


def parse_int(s: str) -> int:
    """Parse a non-negative decimal integer made of ASCII digits only."""
    if not s or not s.isascii() or not s.isdigit():
        raise ParseError(f"Invalid integer: {s!r}")
    return int(s)


def parse_ints(s: str) -> list[int]:
    """Parse whitespace-separated integers."""
    return [parse_int(token) for token in s.split()]

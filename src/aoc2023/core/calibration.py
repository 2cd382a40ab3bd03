"""Day 1: Trebuchet calibration values."""

import logging
from typing import Callable, Iterable, Iterator

from .errors import DomainError
from .parsing import lines_of

logger = logging.getLogger(__name__)

DIGIT_CHARS = "0123456789"
DIGIT_NAMES = ("zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine")


def literal_digits(line: str) -> Iterator[int]:
    """Yield the value of every digit character, left to right."""
    for c in line:
        if c in DIGIT_CHARS:
            yield int(c)


def spelled_digits(line: str) -> Iterator[int]:
    """
    Yield digits written either as characters or as English words.

    The scan moves one character at a time, so overlapping words all match:
    "eightwo" yields 8 then 2.
    """
    for index, c in enumerate(line):
        if c in DIGIT_CHARS:
            yield int(c)
            continue
        for value, name in enumerate(DIGIT_NAMES):
            if line.startswith(name, index):
                yield value
                break


def calibration_value(digits: Iterable[int]) -> int:
    """Combine the first and last digit into a two-digit number."""
    it = iter(digits)
    first = next(it, None)
    if first is None:
        raise DomainError("There should always be at least one digit")
    last = first
    for last in it:
        pass
    return first * 10 + last


def sum_calibration_values(text: str, digits: Callable[[str], Iterable[int]]) -> int:
    """Sum the calibration value of every line."""
    total = 0
    lines = lines_of(text)
    for line in lines:
        try:
            total += calibration_value(digits(line))
        except DomainError as e:
            raise DomainError(f"{e}: {line!r}") from e
    logger.debug("Summed %d calibration lines", len(lines))
    return total


def first_part(text: str) -> int:
    return sum_calibration_values(text, literal_digits)


def second_part(text: str) -> int:
    return sum_calibration_values(text, spelled_digits)

"""Day 3: Gear Ratios - numbers and symbols on an engine schematic."""

import logging
from dataclasses import dataclass
from typing import Iterator

from .parsing import lines_of

logger = logging.getLogger(__name__)

GEAR = "*"


@dataclass(frozen=True)
class NumberToken:
    """A maximal run of digits within one row."""

    row: int
    column: int
    text: str

    @property
    def value(self) -> int:
        return int(self.text)

    @property
    def length(self) -> int:
        return len(self.text)


def is_digit(c: str | None) -> bool:
    return c is not None and c in "0123456789"


def is_symbol(c: str) -> bool:
    return c != "." and not is_digit(c)


def cell(lines: list[str], row: int, column: int) -> str | None:
    """Character at (row, column), or None outside a (possibly ragged) grid."""
    if row < 0 or row >= len(lines) or column < 0 or column >= len(lines[row]):
        return None
    return lines[row][column]


def find_numbers(lines: list[str]) -> Iterator[NumberToken]:
    """Yield every number in row-major order."""
    for row, line in enumerate(lines):
        column = 0
        while column < len(line):
            if not is_digit(line[column]):
                column += 1
                continue
            end = column
            while end < len(line) and is_digit(line[end]):
                end += 1
            yield NumberToken(row=row, column=column, text=line[column:end])
            column = end


def is_part_number(lines: list[str], token: NumberToken) -> bool:
    """Check for a symbol in the box surrounding the token."""
    for row in range(token.row - 1, token.row + 2):
        for column in range(token.column - 1, token.column + token.length + 1):
            c = cell(lines, row, column)
            if c is not None and is_symbol(c):
                return True
    return False


def find_gears(lines: list[str]) -> Iterator[tuple[int, int]]:
    """Yield the (row, column) of every gear candidate."""
    for row, line in enumerate(lines):
        for column, c in enumerate(line):
            if c == GEAR:
                yield row, column


def _run_ending_at(lines: list[str], row: int, column: int) -> NumberToken | None:
    """Digit run whose last character sits at (row, column)."""
    if not is_digit(cell(lines, row, column)):
        return None
    start = column
    while is_digit(cell(lines, row, start - 1)):
        start -= 1
    return NumberToken(row=row, column=start, text=lines[row][start : column + 1])


def _run_starting_at(lines: list[str], row: int, column: int) -> NumberToken | None:
    """Digit run whose first character sits at (row, column)."""
    if not is_digit(cell(lines, row, column)):
        return None
    end = column
    while is_digit(cell(lines, row, end + 1)):
        end += 1
    return NumberToken(row=row, column=column, text=lines[row][column : end + 1])


def _run_covering(lines: list[str], row: int, column: int) -> NumberToken | None:
    """Digit run that includes (row, column)."""
    if not is_digit(cell(lines, row, column)):
        return None
    start = column
    while is_digit(cell(lines, row, start - 1)):
        start -= 1
    return _run_starting_at(lines, row, start)


def gear_numbers(lines: list[str], row: int, column: int) -> list[NumberToken]:
    """
    Numbers adjacent to the cell at (row, column).

    On the gear's own row, look at the run ending just left and the run
    starting just right. On the rows above and below, a digit directly over
    or under the gear belongs to a single number; otherwise look diagonally
    left and right.
    """
    candidates = [
        _run_ending_at(lines, row, column - 1),
        _run_starting_at(lines, row, column + 1),
    ]
    for other in (row - 1, row + 1):
        covering = _run_covering(lines, other, column)
        if covering is not None:
            candidates.append(covering)
        else:
            candidates.append(_run_ending_at(lines, other, column - 1))
            candidates.append(_run_starting_at(lines, other, column + 1))
    return [token for token in candidates if token is not None]


def gear_ratio(lines: list[str], row: int, column: int) -> int | None:
    """Product of the two adjacent numbers, or None unless exactly two."""
    numbers = gear_numbers(lines, row, column)
    if len(numbers) != 2:
        return None
    left, right = numbers
    return left.value * right.value


def first_part(text: str) -> int:
    lines = lines_of(text)
    parts = [token.value for token in find_numbers(lines) if is_part_number(lines, token)]
    logger.debug("Found %d part numbers", len(parts))
    return sum(parts)


def second_part(text: str) -> int:
    lines = lines_of(text)
    total = 0
    for row, column in find_gears(lines):
        ratio = gear_ratio(lines, row, column)
        if ratio is not None:
            total += ratio
    return total

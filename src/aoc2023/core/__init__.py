"""Functional core - pure puzzle logic with no I/O."""

from .errors import InvalidInput, ParseError, DomainError
from .interval import Interval
from .calibration import literal_digits, spelled_digits, calibration_value
from .cubes import CubeSet, Game, parse_cube_set
from .schematic import NumberToken, find_numbers, is_part_number, gear_numbers
from .scratchcards import Card, count_copies
from .almanac import Almanac, Category, RangeMap, RangeSplit
from .races import Race, parse_races, parse_single_race

__all__ = [
    # Errors
    "InvalidInput",
    "ParseError",
    "DomainError",
    "Interval",
    # Day 1
    "literal_digits",
    "spelled_digits",
    "calibration_value",
    # Day 2
    "CubeSet",
    "Game",
    "parse_cube_set",
    # Day 3
    "NumberToken",
    "find_numbers",
    "is_part_number",
    "gear_numbers",
    # Day 4
    "Card",
    "count_copies",
    # Day 5
    "Almanac",
    "Category",
    "RangeMap",
    "RangeSplit",
    # Day 6
    "Race",
    "parse_races",
    "parse_single_race",
]

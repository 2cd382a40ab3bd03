"""Registry of solved days."""

from dataclasses import dataclass
from typing import Callable

from .core import almanac, calibration, cubes, races, schematic, scratchcards

Solver = Callable[[str], int]


@dataclass(frozen=True)
class Day:
    """A puzzle day and its two answer functions."""

    number: int
    title: str
    first_part: Solver
    second_part: Solver


DAYS: dict[int, Day] = {
    day.number: day
    for day in (
        Day(1, "Trebuchet?!", calibration.first_part, calibration.second_part),
        Day(2, "Cube Conundrum", cubes.first_part, cubes.second_part),
        Day(3, "Gear Ratios", schematic.first_part, schematic.second_part),
        Day(4, "Scratchcards", scratchcards.first_part, scratchcards.second_part),
        Day(5, "If You Give A Seed A Fertilizer", almanac.first_part, almanac.second_part),
        Day(6, "Wait For It", races.first_part, races.second_part),
    )
}
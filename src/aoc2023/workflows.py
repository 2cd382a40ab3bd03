"""Shared workflow layer between the CLI commands.

Each solve_* function reads the input once, runs the day's answer
functions and returns plain results for display.
"""

import logging
from dataclasses import dataclass

from .adapters.bundled_inputs import BundledInputSource
from .adapters.composite_inputs import CompositeInputSource
from .adapters.file_inputs import FileInputSource
from .config import Config
from .days import DAYS, Day
from .ports import InputSource

logger = logging.getLogger(__name__)


@dataclass
class DayResult:
    """Answers for one day; a part that was not run is None."""

    day: int
    title: str
    part1: int | None = None
    part2: int | None = None

    def to_dict(self) -> dict:
        return {"day": self.day, "title": self.title, "part1": self.part1, "part2": self.part2}


def get_input_source(config: Config) -> InputSource:
    """Personal inputs from the configured directory, then the bundled ones."""
    return CompositeInputSource([FileInputSource(config.input_path), BundledInputSource()])


def solve_day(day: Day, text: str, parts: tuple[int, ...] = (1, 2)) -> DayResult:
    """Run the requested parts of a day against its input text."""
    result = DayResult(day=day.number, title=day.title)
    if 1 in parts:
        result.part1 = day.first_part(text)
    if 2 in parts:
        result.part2 = day.second_part(text)
    logger.debug("Day %d: %s / %s", day.number, result.part1, result.part2)
    return result


def selected_days(config: Config) -> list[Day]:
    """Days to run, in order; unknown configured days are skipped."""
    if not config.days:
        return [DAYS[number] for number in sorted(DAYS)]
    days = []
    for number in config.days:
        if number not in DAYS:
            logger.warning(f"Day {number} is not solved, skipping")
            continue
        days.append(DAYS[number])
    return days


def solve_all(config: Config, source: InputSource | None = None) -> list[DayResult]:
    """Solve every selected day. The first invalid input aborts the run."""
    source = source or get_input_source(config)
    return [solve_day(day, source.read(day.number)) for day in selected_days(config)]

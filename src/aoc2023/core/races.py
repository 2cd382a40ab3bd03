"""Day 6: Wait For It - boat races."""

import logging
import math
from dataclasses import dataclass

from .errors import ParseError
from .interval import EMPTY, Interval
from .parsing import lines_of, parse_int, parse_ints, strip_prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Race:
    """A race duration and the record distance to beat."""

    time: int
    distance: int

    def score(self, hold_time: int) -> int:
        """Distance travelled when holding the button for hold_time."""
        return (self.time - hold_time) * hold_time

    def beatable_range_scan(self) -> Interval:
        """Hold times beating the record, found by scanning up from 0."""
        for hold_time in range(self.time):
            if self.score(hold_time) > self.distance:
                return Interval(hold_time, self.time - hold_time + 1)
        return EMPTY

    def beatable_range(self) -> Interval:
        """
        Hold times beating the record, from the roots of the score parabola.

        The score is symmetric around time / 2, so the winning hold times form
        [start, time - start]. The square root only gives an estimate of start;
        it is corrected with exact integer comparisons.
        """
        if self.score(self.time // 2) <= self.distance:
            return EMPTY
        discriminant = self.time * self.time - 4 * self.distance
        start = max(0, (self.time - math.isqrt(discriminant)) // 2)
        while start > 0 and self.score(start - 1) > self.distance:
            start -= 1
        while self.score(start) <= self.distance:
            start += 1
        return Interval(start, self.time - start + 1)

    def ways_to_win(self) -> int:
        return len(self.beatable_range())


def _read_lines(text: str) -> tuple[str, str]:
    lines = lines_of(text)
    if len(lines) != 2:
        raise ParseError(f"Expected a Time line and a Distance line, got {len(lines)} lines")
    times, distances = lines
    return strip_prefix(times, "Time:"), strip_prefix(distances, "Distance:")


def parse_races(text: str) -> list[Race]:
    """Parse the Time and Distance columns into races."""
    times, distances = (parse_ints(values) for values in _read_lines(text))
    if len(times) != len(distances):
        raise ParseError(f"{len(times)} times but {len(distances)} distances")
    return [Race(time, distance) for time, distance in zip(times, distances)]


def parse_single_race(text: str) -> Race:
    """Parse both lines as one race, ignoring the spaces between digits."""
    times, distances = ("".join(values.split()) for values in _read_lines(text))
    return Race(parse_int(times), parse_int(distances))


def first_part(text: str) -> int:
    # An unbeatable race contributes 0 and zeroes the whole product.
    return math.prod(race.ways_to_win() for race in parse_races(text))


def second_part(text: str) -> int:
    race = parse_single_race(text)
    logger.debug("Single race: time=%d distance=%d", race.time, race.distance)
    return race.ways_to_win()

"""Day 2: Cube Conundrum."""

import logging
from dataclasses import dataclass

from .errors import ParseError
from .parsing import lines_of, parse_int, split_once, strip_prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CubeSet:
    """Counts of red, green and blue cubes."""

    red: int = 0
    green: int = 0
    blue: int = 0

    @property
    def power(self) -> int:
        return self.red * self.green * self.blue

    def maximum(self, other: "CubeSet") -> "CubeSet":
        """Element-wise maximum of two cube sets."""
        return CubeSet(
            red=max(self.red, other.red),
            green=max(self.green, other.green),
            blue=max(self.blue, other.blue),
        )

    def fits_within(self, caps: "CubeSet") -> bool:
        """Check that no color exceeds the matching cap."""
        return self.red <= caps.red and self.green <= caps.green and self.blue <= caps.blue


BAG_CONTENTS = CubeSet(red=12, green=13, blue=14)


def parse_cube_set(s: str) -> CubeSet:
    """
    Parse a cube set such as "3 blue, 4 red".

    A color given twice keeps the last count.
    """
    counts = {"red": 0, "green": 0, "blue": 0}
    for part in s.split(", "):
        n, color = split_once(part, " ")
        if color not in counts:
            raise ParseError(f"Unknown color: {color!r}")
        counts[color] = parse_int(n)
    return CubeSet(**counts)


@dataclass(frozen=True)
class Game:
    """A game and the cube sets revealed during it."""

    id: int
    cube_sets: tuple[CubeSet, ...]

    @classmethod
    def parse(cls, line: str) -> "Game":
        """Parse a line like "Game 1: 3 blue, 4 red; 1 red, 2 green"."""
        s = strip_prefix(line, "Game ")
        game_id, cube_sets = split_once(s, ": ")
        return cls(
            id=parse_int(game_id),
            cube_sets=tuple(parse_cube_set(part) for part in cube_sets.split("; ")),
        )

    def is_possible(self, caps: CubeSet = BAG_CONTENTS) -> bool:
        return all(cube_set.fits_within(caps) for cube_set in self.cube_sets)

    def required_set(self) -> CubeSet:
        """Fewest cubes of each color that make the game possible."""
        required = CubeSet()
        for cube_set in self.cube_sets:
            required = required.maximum(cube_set)
        return required


def parse_games(text: str) -> list[Game]:
    games = [Game.parse(line) for line in lines_of(text)]
    logger.debug("Parsed %d games", len(games))
    return games


def first_part(text: str) -> int:
    return sum(game.id for game in parse_games(text) if game.is_possible())


def second_part(text: str) -> int:
    return sum(game.required_set().power for game in parse_games(text))

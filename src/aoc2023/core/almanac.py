"""Day 5: If You Give A Seed A Fertilizer - chained range remapping.

A category translates values through a set of range maps. Whole intervals
are pushed through the chain by splitting them against each map instead of
enumerating every seed.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from .errors import DomainError, ParseError
from .interval import Interval
from .parsing import lines_of, parse_ints, strip_prefix

logger = logging.getLogger(__name__)

CATEGORY_NAMES = (
    "seed-to-soil",
    "soil-to-fertilizer",
    "fertilizer-to-water",
    "water-to-light",
    "light-to-temperature",
    "temperature-to-humidity",
    "humidity-to-location",
)


@dataclass(frozen=True)
class RangeSplit:
    """Pieces of an interval cut by one range map.

    `below` and `above` are left in source coordinates; `mapped` is already
    translated to the destination range. Missing pieces are None.
    """

    below: Interval | None
    mapped: Interval | None
    above: Interval | None

    @property
    def rejected(self) -> list[Interval]:
        return [piece for piece in (self.below, self.above) if piece is not None]


def _non_empty(interval: Interval) -> Interval | None:
    return None if interval.is_empty else interval


@dataclass(frozen=True)
class RangeMap:
    """Translate [source, source + length) onto [destination, destination + length)."""

    destination: int
    source: int
    length: int

    @classmethod
    def parse(cls, line: str) -> "RangeMap":
        """Parse "<destination> <source> <length>"."""
        values = parse_ints(line)
        if len(values) != 3:
            raise ParseError(f"Expected three integers: {line!r}")
        return cls(*values)

    @property
    def source_interval(self) -> Interval:
        return Interval.of_length(self.source, self.length)

    @property
    def offset(self) -> int:
        return self.destination - self.source

    def map(self, value: int) -> int | None:
        """Translated value, or None when value is outside the source range."""
        if self.source_interval.contains(value):
            return value + self.offset
        return None

    def split(self, interval: Interval) -> RangeSplit:
        """Cut interval into the parts below, inside and above the source range."""
        source = self.source_interval
        below = Interval(interval.start, min(interval.end, source.start))
        inside = Interval(max(interval.start, source.start), min(interval.end, source.end))
        above = Interval(max(interval.start, source.end), interval.end)
        return RangeSplit(
            below=_non_empty(below),
            mapped=None if inside.is_empty else inside.shift(self.offset),
            above=_non_empty(above),
        )


@dataclass(frozen=True)
class Category:
    """A named set of non-overlapping range maps, e.g. seed-to-soil."""

    name: str
    maps: tuple[RangeMap, ...]

    def map(self, value: int) -> int:
        """First map containing value wins; unmapped values pass through."""
        for range_map in self.maps:
            mapped = range_map.map(value)
            if mapped is not None:
                return mapped
        return value

    def map_intervals(self, intervals: Iterable[Interval]) -> list[Interval]:
        """Map whole intervals, keeping unclaimed pieces unchanged."""
        pending = [interval for interval in intervals if not interval.is_empty]
        output: list[Interval] = []
        for range_map in self.maps:
            rejected: list[Interval] = []
            for interval in pending:
                split = range_map.split(interval)
                if split.mapped is not None:
                    output.append(split.mapped)
                rejected.extend(split.rejected)
            pending = rejected
        output.extend(pending)
        return output


@dataclass(frozen=True)
class Almanac:
    """Seeds and the chain of categories leading to a location."""

    seeds: tuple[int, ...]
    categories: tuple[Category, ...]

    @classmethod
    def parse(cls, text: str) -> "Almanac":
        lines = iter(lines_of(text))

        header = next(lines, None)
        if header is None:
            raise ParseError("Missing seeds line")
        seeds = tuple(parse_ints(strip_prefix(header, "seeds: ")))
        separator = next(lines, "")
        if separator:
            raise ParseError(f"Expected an empty line after seeds, got {separator!r}")

        categories = tuple(_parse_category(lines, name) for name in CATEGORY_NAMES)

        trailing = next(lines, None)
        if trailing is not None:
            raise ParseError(f"Unexpected line after the last map: {trailing!r}")

        return cls(seeds=seeds, categories=categories)

    def location(self, seed: int) -> int:
        value = seed
        for category in self.categories:
            value = category.map(value)
        return value

    def locations(self, intervals: Iterable[Interval]) -> list[Interval]:
        current = list(intervals)
        for category in self.categories:
            current = category.map_intervals(current)
            logger.debug("%s: %d intervals", category.name, len(current))
        return current

    def seed_intervals(self) -> list[Interval]:
        """Read the seeds as (start, length) pairs."""
        if len(self.seeds) % 2:
            raise DomainError("Seed ranges come in (start, length) pairs")
        return [
            Interval.of_length(start, length)
            for start, length in zip(self.seeds[::2], self.seeds[1::2])
        ]


def _parse_category(lines: Iterator[str], name: str) -> Category:
    """Parse a "<name> map:" header and its map lines up to a blank line."""
    header = next(lines, None)
    if header != f"{name} map:":
        raise ParseError(f"Expected {name!r} header, got {header!r}")
    maps = []
    for line in lines:
        if not line:
            break
        maps.append(RangeMap.parse(line))
    return Category(name=name, maps=tuple(maps))


def first_part(text: str) -> int:
    almanac = Almanac.parse(text)
    if not almanac.seeds:
        raise DomainError("Empty seed list")
    return min(almanac.location(seed) for seed in almanac.seeds)


def second_part(text: str) -> int:
    almanac = Almanac.parse(text)
    locations = [
        interval
        for interval in almanac.locations(almanac.seed_intervals())
        if not interval.is_empty
    ]
    if not locations:
        raise DomainError("Empty seed list")
    return min(interval.start for interval in locations)

"""Composite input adapter - first source holding a day wins."""

import logging

from aoc2023.ports import InputSource

logger = logging.getLogger(__name__)


class CompositeInputSource:
    """
    Composite input source trying each source in order.

    Implements InputSource protocol.
    """

    def __init__(self, sources: list[InputSource]):
        self._sources = sources

    def read(self, day: int) -> str:
        """Read the day from the first source that has it."""
        for source in self._sources:
            if source.exists(day):
                logger.debug("Day %d input from %s", day, type(source).__name__)
                return source.read(day)
        raise FileNotFoundError(f"No input found for day {day}")

    def exists(self, day: int) -> bool:
        return any(source.exists(day) for source in self._sources)

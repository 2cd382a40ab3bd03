"""Puzzle input interface."""

from typing import Protocol


class InputSource(Protocol):
    """Interface for reading a day's puzzle input."""

    def read(self, day: int) -> str:
        """Read the input text for a day. Raises FileNotFoundError if missing."""
        ...

    def exists(self, day: int) -> bool:
        """Check if an input is available for a day."""
        ...

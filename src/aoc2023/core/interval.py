"""Half-open integer intervals."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Interval:
    """Half-open integer interval [start, end)."""

    start: int
    end: int

    @classmethod
    def of_length(cls, start: int, length: int) -> "Interval":
        return cls(start, start + length)

    def __len__(self) -> int:
        return max(0, self.end - self.start)

    @property
    def is_empty(self) -> bool:
        return self.end <= self.start

    def contains(self, value: int) -> bool:
        return self.start <= value < self.end

    def overlaps(self, other: "Interval") -> bool:
        return self.start < other.end and other.start < self.end

    def shift(self, offset: int) -> "Interval":
        return Interval(self.start + offset, self.end + offset)


EMPTY = Interval(0, 0)

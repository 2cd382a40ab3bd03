"""Day 4: Scratchcards."""

import logging
from dataclasses import dataclass

from .parsing import lines_of, parse_int, parse_ints, split_once, strip_prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Card:
    """A scratchcard: winning numbers on the left, drawn numbers on the right."""

    id: int
    winning: tuple[int, ...]
    drawn: tuple[int, ...]

    @classmethod
    def parse(cls, line: str) -> "Card":
        """Parse a line like "Card  3:  1 21 | 69 82  1"."""
        s = strip_prefix(line, "Card ")
        card_id, s = split_once(s, ": ")
        winning, drawn = split_once(s, " | ")
        return cls(
            id=parse_int(card_id.lstrip(" ")),
            winning=tuple(parse_ints(winning)),
            drawn=tuple(parse_ints(drawn)),
        )

    @property
    def matches(self) -> int:
        """Drawn numbers that are winning numbers, duplicates counted."""
        winning = set(self.winning)
        return sum(1 for n in self.drawn if n in winning)

    @property
    def points(self) -> int:
        """0 without a match, else 1 doubled for each match after the first."""
        count = self.matches
        return 0 if count == 0 else 1 << (count - 1)


def count_copies(cards: list[Card]) -> list[int]:
    """
    Instance count of every card once all won copies are handed out.

    A card with k matches wins one copy of each of the next k cards for
    every instance of itself.
    """
    counts = [1] * len(cards)
    for i, card in enumerate(cards):
        for j in range(i + 1, min(i + 1 + card.matches, len(cards))):
            counts[j] += counts[i]
    return counts


def parse_cards(text: str) -> list[Card]:
    cards = [Card.parse(line) for line in lines_of(text)]
    logger.debug("Parsed %d cards", len(cards))
    return cards


def first_part(text: str) -> int:
    return sum(card.points for card in parse_cards(text))


def second_part(text: str) -> int:
    return sum(count_copies(parse_cards(text)))

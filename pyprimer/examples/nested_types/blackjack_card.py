"""Enums and named tuples nested inside a class."""

from enum import Enum, IntEnum
from typing import NamedTuple, Optional

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.nested_types import TOPIC


class BlackjackCard:
    class Values(NamedTuple):
        first: int
        second: Optional[int]

    class Suit(Enum):
        SPADES = "spades"
        HEARTS = "hearts"
        DIAMONDS = "diamonds"
        CLUBS = "clubs"

    class Rank(IntEnum):
        TWO = 2
        THREE = 3
        FOUR = 4
        FIVE = 5
        SIX = 6
        SEVEN = 7
        EIGHT = 8
        NINE = 9
        TEN = 10
        JACK = 11
        QUEEN = 12
        KING = 13
        ACE = 14

        @property
        def values(self) -> "BlackjackCard.Values":
            if self is BlackjackCard.Rank.ACE:
                return BlackjackCard.Values(1, 11)
            if self >= BlackjackCard.Rank.JACK:
                return BlackjackCard.Values(10, None)
            return BlackjackCard.Values(int(self), None)

    def __init__(self, rank: "BlackjackCard.Rank", suit: "BlackjackCard.Suit"):
        self.rank = rank
        self.suit = suit

    @property
    def description(self) -> str:
        values = self.rank.values
        output = f"suit is {self.suit.value}, value is {values.first}"
        if values.second is not None:
            output += f" or {values.second}"
        return output


def execute():
    the_ace_of_spades = BlackjackCard(rank=BlackjackCard.Rank.ACE, suit=BlackjackCard.Suit.SPADES)
    print(f"the_ace_of_spades: {the_ace_of_spades.description}")

    king = BlackjackCard(BlackjackCard.Rank.KING, BlackjackCard.Suit.HEARTS)
    print(f"king: {king.description}")
    five = BlackjackCard(BlackjackCard.Rank.FIVE, BlackjackCard.Suit.CLUBS)
    print(f"five: {five.description}")

    hearts_name = BlackjackCard.Suit.HEARTS.value
    print(hearts_name)
    print(BlackjackCard.Suit.__qualname__, BlackjackCard.Values.__qualname__)


EXAMPLE_UNIT = ExampleUnit(
    id="nested_types.blackjack_card",
    title="Nested types",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "the_ace_of_spades: suit is spades, value is 1 or 11",
        "king: suit is hearts, value is 10",
        "five: suit is clubs, value is 5",
        "hearts",
        "BlackjackCard.Suit BlackjackCard.Values",
    ),
)

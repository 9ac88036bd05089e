"""Abstract base classes and the collections.abc mixin methods."""

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence, Sized

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.protocols import TOPIC


class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        ...

    @abstractmethod
    def perimeter(self) -> float:
        ...

    def describe(self) -> str:
        return f"{type(self).__name__}: area {self.area():.2f}, perimeter {self.perimeter():.2f}"


class Square(Shape):
    def __init__(self, side: float):
        self.side = side

    def area(self) -> float:
        return self.side * self.side

    def perimeter(self) -> float:
        return 4 * self.side


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def area(self) -> float:
        return math.pi * self.radius ** 2

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius


class Deck(Sequence):
    """Only __len__ and __getitem__ are written here."""

    def __init__(self, cards):
        self._cards = list(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __getitem__(self, index):
        return self._cards[index]


def execute():
    for shape in (Square(2), Circle(1)):
        print(shape.describe())

    try:
        Shape()
    except TypeError:
        print("cannot instantiate Shape")

    deck = Deck(["A", "K", "Q"])
    print(list(reversed(deck)), "K" in deck, deck.index("Q"))
    print(isinstance(deck, Sized), isinstance([], Deck))


EXAMPLE_UNIT = ExampleUnit(
    id="protocols.abstract_base_classes",
    title="Abstract base classes",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Square: area 4.00, perimeter 8.00",
        "Circle: area 3.14, perimeter 6.28",
        "cannot instantiate Shape",
        "['Q', 'K', 'A'] True 2",
        "True False",
    ),
)

"""Operator methods on a small vector type."""

import math
from dataclasses import dataclass

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.advanced_operators import TOPIC


@dataclass(frozen=True)
class Vector2D:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self):
        return Vector2D(-self.x, -self.y)

    def __mul__(self, scalar):
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __matmul__(self, other):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x * other.x + self.y * other.y

    def __abs__(self):
        return math.hypot(self.x, self.y)


def execute():
    vector = Vector2D(3.0, 1.0)
    another_vector = Vector2D(2.0, 4.0)
    print(vector + another_vector)

    positive = Vector2D(3.0, 4.0)
    negative = -positive
    also_positive = -negative
    print(negative)
    print(also_positive)

    original = Vector2D(1.0, 2.0)
    original += Vector2D(3.0, 4.0)
    print(original)

    two_three = Vector2D(2.0, 3.0)
    another_two_three = Vector2D(2.0, 3.0)
    if two_three == another_two_three:
        print("These two vectors are equivalent.")

    print(2 * Vector2D(1.0, 4.0))
    print(Vector2D(1.0, 2.0) @ Vector2D(3.0, 4.0))
    print(abs(positive))

    try:
        vector + 1
    except TypeError:
        print("unsupported operand")


EXAMPLE_UNIT = ExampleUnit(
    id="advanced_operators.operator_overloading",
    title="Operator overloading",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Vector2D(x=5.0, y=5.0)",
        "Vector2D(x=-3.0, y=-4.0)",
        "Vector2D(x=3.0, y=4.0)",
        "Vector2D(x=4.0, y=6.0)",
        "These two vectors are equivalent.",
        "Vector2D(x=2.0, y=8.0)",
        "11.0",
        "5.0",
        "unsupported operand",
    ),
)

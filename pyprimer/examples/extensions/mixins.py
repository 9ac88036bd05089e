"""
Extensions

Built-in types cannot be reopened, so behavior is added by subclassing,
by attaching functions to your own classes after the fact, or by mixing
small behavior-only classes into new ones.
"""

from dataclasses import dataclass

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.extensions import TOPIC


class Length(float):
    """A float measured in meters with unit conversion helpers."""

    @property
    def km(self) -> float:
        return self * 1_000.0

    @property
    def m(self) -> float:
        return float(self)

    @property
    def cm(self) -> float:
        return self / 100.0

    @property
    def mm(self) -> float:
        return self / 1_000.0

    @property
    def ft(self) -> float:
        return self * 0.3048


@dataclass
class Size:
    width: float = 0.0
    height: float = 0.0


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    origin: Point
    size: Size


def _rect_from_center(cls, center: Point, size: Size) -> Rect:
    origin = Point(center.x - size.width / 2, center.y - size.height / 2)
    return cls(origin, size)


Rect.from_center = classmethod(_rect_from_center)


class ReprMixin:
    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"{type(self).__name__}({fields})"


class EqualityMixin:
    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)


class Coordinate(ReprMixin, EqualityMixin):
    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y


def execute():
    one_inch = Length(25.4).mm
    print(f"One inch is {one_inch:.4f} meters")
    three_feet = Length(3).ft
    print(f"Three feet is {three_feet:.4f} meters")
    a_marathon = Length(42).km + Length(195).m
    print(f"A marathon is {a_marathon:.1f} meters long")

    print(Rect.from_center(Point(4.0, 4.0), Size(3.0, 3.0)))

    print(Coordinate(1, 2))
    print(Coordinate(1, 2) == Coordinate(1, 2), Coordinate(1, 2) == Coordinate(2, 1))


EXAMPLE_UNIT = ExampleUnit(
    id="extensions.mixins",
    title="Adding behavior to existing types",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "One inch is 0.0254 meters",
        "Three feet is 0.9144 meters",
        "A marathon is 42195.0 meters long",
        "Rect(origin=Point(x=2.5, y=2.5), size=Size(width=3.0, height=3.0))",
        "Coordinate(x=1, y=2)",
        "True False",
    ),
)

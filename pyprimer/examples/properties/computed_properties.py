"""Read-only and settable computed attributes with @property."""

from dataclasses import dataclass

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.properties import TOPIC


@dataclass
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Size:
    width: float = 0.0
    height: float = 0.0


class Rect:
    def __init__(self, origin: Point, size: Size):
        self.origin = origin
        self.size = size

    @property
    def center(self) -> Point:
        return Point(
            self.origin.x + self.size.width / 2,
            self.origin.y + self.size.height / 2,
        )

    @center.setter
    def center(self, new_center: Point) -> None:
        self.origin.x = new_center.x - self.size.width / 2
        self.origin.y = new_center.y - self.size.height / 2


class Cuboid:
    def __init__(self, width=0.0, height=0.0, depth=0.0):
        self.width = width
        self.height = height
        self.depth = depth

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth


def execute():
    square = Rect(origin=Point(0.0, 0.0), size=Size(10.0, 10.0))
    initial_center = square.center
    print(f"initial center is {initial_center}")
    square.center = Point(15.0, 15.0)
    print(f"square.origin is now at ({square.origin.x}, {square.origin.y})")

    four_by_five_by_two = Cuboid(width=4.0, height=5.0, depth=2.0)
    print(f"the volume of four_by_five_by_two is {four_by_five_by_two.volume}")
    try:
        four_by_five_by_two.volume = 12.0
    except AttributeError:
        print("volume is read-only")


EXAMPLE_UNIT = ExampleUnit(
    id="properties.computed_properties",
    title="Computed properties",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "initial center is Point(x=5.0, y=5.0)",
        "square.origin is now at (10.0, 10.0)",
        "the volume of four_by_five_by_two is 40.0",
        "volume is read-only",
    ),
)

"""
Methods on immutable values return a new value instead of changing self.
"""

from dataclasses import FrozenInstanceError, dataclass, replace
from enum import Enum

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.methods import TOPIC


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0

    def moved_by(self, delta_x: float, delta_y: float) -> "Point":
        return replace(self, x=self.x + delta_x, y=self.y + delta_y)


class TriStateSwitch(Enum):
    OFF = 0
    LOW = 1
    HIGH = 2

    def next(self) -> "TriStateSwitch":
        members = list(TriStateSwitch)
        return members[(members.index(self) + 1) % len(members)]


def execute():
    some_point = Point(1.0, 1.0)
    moved = some_point.moved_by(2.0, 3.0)
    print(f"The point is now at ({moved.x}, {moved.y})")
    print(some_point)

    try:
        some_point.x = 5.0
    except FrozenInstanceError as exc:
        print(type(exc).__name__)

    oven_light = TriStateSwitch.LOW
    oven_light = oven_light.next()
    print(oven_light.name)
    oven_light = oven_light.next()
    print(oven_light.name)


EXAMPLE_UNIT = ExampleUnit(
    id="methods.immutable_updates",
    title="Returning updated copies",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "The point is now at (3.0, 4.0)",
        "Point(x=1.0, y=1.0)",
        "FrozenInstanceError",
        "HIGH",
        "OFF",
    ),
)

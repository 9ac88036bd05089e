"""
Property wrappers

A descriptor packages the get/set logic for an attribute once so it can
be reused on any class. ``__set_name__`` tells the descriptor which
attribute it manages.
"""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.properties import TOPIC


class Clamped:
    """Keeps an integer attribute within ``[minimum, maximum]``."""

    def __init__(self, minimum: int = 0, maximum: int = 12):
        self.minimum = minimum
        self.maximum = maximum

    def __set_name__(self, owner, name):
        self.private_name = f"_{name}"

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return getattr(instance, self.private_name, self.minimum)

    def __set__(self, instance, value):
        setattr(instance, self.private_name, max(self.minimum, min(value, self.maximum)))


class SmallRectangle:
    height = Clamped()
    width = Clamped()


def execute():
    rectangle = SmallRectangle()
    print(rectangle.height)

    rectangle.height = 10
    print(rectangle.height)

    rectangle.height = 24
    print(rectangle.height)

    rectangle.width = -3
    print(rectangle.width)
    print(type(SmallRectangle.height).__name__)


EXAMPLE_UNIT = ExampleUnit(
    id="properties.property_wrappers",
    title="Reusable descriptors",
    topic=TOPIC,
    body=execute,
    expected_output=("0", "10", "12", "0", "Clamped"),
)

"""
Cooperative multiple inheritance

``super()`` follows the method resolution order of the instance's
class, not the class the method was written in. In a diamond every
class runs exactly once. ``__init_subclass__`` can refuse subclassing
outright.
"""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.inheritance import TOPIC


class Base:
    def greet(self) -> list:
        return ["Base"]


class Left(Base):
    def greet(self) -> list:
        return ["Left"] + super().greet()


class Right(Base):
    def greet(self) -> list:
        return ["Right"] + super().greet()


class Child(Left, Right):
    def greet(self) -> list:
        return ["Child"] + super().greet()


class Sealed:
    def __init_subclass__(cls, **kwargs):
        raise TypeError(f"Sealed cannot be subclassed by {cls.__name__}")


def execute():
    print(" -> ".join(Child().greet()))
    print(" -> ".join(Left().greet()))

    try:
        class Attempt(Sealed):
            pass
    except TypeError as exc:
        print(exc)


EXAMPLE_UNIT = ExampleUnit(
    id="inheritance.cooperative_inheritance",
    title="super() and the diamond",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Child -> Left -> Right -> Base",
        "Left -> Base",
        "Sealed cannot be subclassed by Attempt",
    ),
)

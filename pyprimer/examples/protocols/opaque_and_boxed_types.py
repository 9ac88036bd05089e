"""
Opaque and boxed protocol types

A function annotated to return a Protocol hides which concrete class it
builds; callers rely on the protocol alone. A list annotated with the
same Protocol holds any mix of conforming objects, and their concrete
types are only known at runtime.
"""

from dataclasses import dataclass
from typing import List, Protocol, TypeVar, runtime_checkable

from pyprimer.examples.api import example
from pyprimer.examples.protocols import TOPIC


@runtime_checkable
class Shape(Protocol):
    def draw(self) -> str:
        ...


S = TypeVar("S", bound=Shape)


@dataclass
class Triangle:
    size: int

    def draw(self) -> str:
        return "\n".join("*" * length for length in range(1, self.size + 1))


@dataclass
class Square:
    size: int

    def draw(self) -> str:
        return "\n".join(["*" * self.size] * self.size)


@dataclass
class FlippedShape:
    shape: Shape

    def draw(self) -> str:
        return "\n".join(reversed(self.shape.draw().split("\n")))


@dataclass
class JoinedShape:
    top: Shape
    bottom: Shape

    def draw(self) -> str:
        return self.top.draw() + "\n" + self.bottom.draw()


def make_trapezoid() -> Shape:
    top = Triangle(size=2)
    middle = Square(size=2)
    bottom = FlippedShape(top)
    return JoinedShape(top, JoinedShape(middle, bottom))


def flip(shape: S) -> Shape:
    return FlippedShape(shape)


def make_shape(kind: str) -> Shape:
    if kind == "triangle":
        return Triangle(size=2)
    return Square(size=2)


@example(
    "protocols.opaque_return_types",
    "Returning a protocol instead of a concrete type",
    TOPIC,
    expected_output=(
        "*",
        "**",
        "**",
        "**",
        "**",
        "*",
        "True",
        "***",
        "**",
        "*",
    ),
)
def opaque_return_types():
    """Callers draw the trapezoid without knowing it is a JoinedShape."""
    trapezoid = make_trapezoid()
    print(trapezoid.draw())
    print(isinstance(trapezoid, Shape))
    print(flip(Triangle(size=3)).draw())


@example(
    "protocols.boxed_protocol_types",
    "Collections of any conforming type",
    TOPIC,
    expected_output=(
        "Triangle 3",
        "Square 4",
        "FlippedShape 3",
        "['Triangle', 'Square']",
        "False",
    ),
)
def boxed_protocol_types():
    """One list holds different concrete shapes behind the same protocol."""
    shapes: List[Shape] = [Triangle(size=2), Square(size=2), flip(Triangle(size=2))]
    for shape in shapes:
        print(type(shape).__name__, shape.draw().count("*"))

    print([type(make_shape(kind)).__name__ for kind in ("triangle", "square")])
    print(isinstance(3, Shape))


EXAMPLE_UNITS = [opaque_return_types, boxed_protocol_types]

"""
Protocols

``typing.Protocol`` describes a shape rather than an ancestry: any
object with the right attributes satisfies it. ``runtime_checkable``
makes isinstance checks possible, though they only test that the names
exist.
"""

import math
from typing import Protocol, runtime_checkable

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.protocols import TOPIC


@runtime_checkable
class FullyNamed(Protocol):
    full_name: str


class Person:
    def __init__(self, full_name: str):
        self.full_name = full_name


class Starship:
    def __init__(self, name: str, prefix: str = None):
        self.name = name
        self.prefix = prefix

    @property
    def full_name(self) -> str:
        return f"{self.prefix} {self.name}" if self.prefix else self.name


class RandomNumberGenerator(Protocol):
    def random(self) -> float:
        ...


class LinearCongruentialGenerator:
    def __init__(self):
        self.last_random = 42.0
        self.m = 139968.0
        self.a = 3877.0
        self.c = 29573.0

    def random(self) -> float:
        self.last_random = math.fmod(self.last_random * self.a + self.c, self.m)
        return self.last_random / self.m


class Dice:
    def __init__(self, sides: int, generator: RandomNumberGenerator):
        self.sides = sides
        self.generator = generator

    def roll(self) -> int:
        return int(self.generator.random() * self.sides) + 1


def execute():
    john = Person("John Appleseed")
    ncc1701 = Starship("Enterprise", prefix="USS")
    print(ncc1701.full_name)
    print(isinstance(john, FullyNamed), isinstance(ncc1701, FullyNamed), isinstance(42, FullyNamed))

    generator = LinearCongruentialGenerator()
    print(f"Here's a random number: {generator.random()}")
    print(f"And another one: {generator.random()}")

    d6 = Dice(sides=6, generator=LinearCongruentialGenerator())
    print("Random dice rolls:", [d6.roll() for _ in range(5)])


EXAMPLE_UNIT = ExampleUnit(
    id="protocols.structural_typing",
    title="Structural typing with Protocol",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "USS Enterprise",
        "True True False",
        "Here's a random number: 0.3746499199817101",
        "And another one: 0.729023776863283",
        "Random dice rolls: [3, 5, 4, 5, 4]",
    ),
)

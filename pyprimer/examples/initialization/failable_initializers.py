"""
Initializers that can fail

Python has two habits for this: a factory that returns ``None`` when
the input is unusable, and a constructor that raises. Enum lookups by
value already raise ``ValueError``.
"""

from enum import Enum
from typing import Optional

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.initialization import TOPIC


class Animal:
    def __init__(self, species: str):
        self.species = species

    @classmethod
    def create(cls, species: str) -> Optional["Animal"]:
        if not species:
            return None
        return cls(species)


class TemperatureUnit(Enum):
    KELVIN = "K"
    CELSIUS = "C"
    FAHRENHEIT = "F"


class Product:
    def __init__(self, name: str):
        if not name:
            raise ValueError("product name must not be empty")
        self.name = name


class CartItem(Product):
    def __init__(self, name: str, quantity: int):
        if quantity < 1:
            raise ValueError("quantity must be at least 1")
        super().__init__(name)
        self.quantity = quantity


def check_unit(symbol: str) -> None:
    try:
        TemperatureUnit(symbol)
    except ValueError:
        print("This isn't a defined temperature unit, so initialization failed.")
    else:
        print("This is a defined temperature unit, so initialization succeeded.")


def execute():
    some_creature = Animal.create("Giraffe")
    if some_creature is not None:
        print(f"An animal was initialized with a species of {some_creature.species}")

    anonymous_creature = Animal.create("")
    if anonymous_creature is None:
        print("The anonymous creature couldn't be initialized")

    check_unit("F")
    check_unit("X")

    two_socks = CartItem("sock", 2)
    print(f"Item: {two_socks.name}, quantity: {two_socks.quantity}")
    try:
        CartItem("shirt", 0)
    except ValueError:
        print("Unable to initialize zero shirts")
    try:
        CartItem("", 1)
    except ValueError:
        print("Unable to initialize one unnamed product")


EXAMPLE_UNIT = ExampleUnit(
    id="initialization.failable_initializers",
    title="Initializers that can fail",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "An animal was initialized with a species of Giraffe",
        "The anonymous creature couldn't be initialized",
        "This is a defined temperature unit, so initialization succeeded.",
        "This isn't a defined temperature unit, so initialization failed.",
        "Item: sock, quantity: 2",
        "Unable to initialize zero shirts",
        "Unable to initialize one unnamed product",
    ),
)

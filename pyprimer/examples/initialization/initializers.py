"""__init__, alternative constructors and dataclass validation."""

from dataclasses import dataclass

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.initialization import TOPIC


class Fahrenheit:
    def __init__(self):
        self.temperature = 32.0


class Celsius:
    def __init__(self, temperature_in_celsius: float):
        self.temperature_in_celsius = temperature_in_celsius

    @classmethod
    def from_fahrenheit(cls, fahrenheit: float) -> "Celsius":
        return cls((fahrenheit - 32.0) * 5 / 9)

    @classmethod
    def from_kelvin(cls, kelvin: float) -> "Celsius":
        return cls(kelvin - 273.15)


@dataclass
class ShoppingListItem:
    name: str
    quantity: int = 1
    purchased: bool = False

    def __post_init__(self):
        if self.quantity < 1:
            raise ValueError(f"quantity must be positive, got {self.quantity}")


def execute():
    f = Fahrenheit()
    print(f"The default temperature is {f.temperature} degrees Fahrenheit")

    boiling_point_of_water = Celsius.from_fahrenheit(212.0)
    freezing_point_of_water = Celsius.from_kelvin(273.15)
    body_temperature = Celsius(37.0)
    print(boiling_point_of_water.temperature_in_celsius)
    print(freezing_point_of_water.temperature_in_celsius)
    print(body_temperature.temperature_in_celsius)

    print(ShoppingListItem(name="Eggs", quantity=6))
    try:
        ShoppingListItem(name="Bacon", quantity=0)
    except ValueError as exc:
        print(exc)


EXAMPLE_UNIT = ExampleUnit(
    id="initialization.initializers",
    title="Initializers and alternative constructors",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "The default temperature is 32.0 degrees Fahrenheit",
        "100.0",
        "0.0",
        "37.0",
        "ShoppingListItem(name='Eggs', quantity=6, purchased=False)",
        "quantity must be positive, got 0",
    ),
)

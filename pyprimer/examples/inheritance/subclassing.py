"""Subclassing, overriding methods and properties, and the MRO."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.inheritance import TOPIC


class Vehicle:
    def __init__(self):
        self.current_speed = 0.0

    @property
    def description(self) -> str:
        return f"traveling at {self.current_speed} miles per hour"

    def make_noise(self) -> None:
        pass


class Bicycle(Vehicle):
    def __init__(self):
        super().__init__()
        self.has_basket = False


class Tandem(Bicycle):
    def __init__(self):
        super().__init__()
        self.current_number_of_passengers = 0


class Train(Vehicle):
    def make_noise(self) -> None:
        print("Choo Choo")


class Car(Vehicle):
    def __init__(self):
        super().__init__()
        self.gear = 1

    @property
    def description(self) -> str:
        return f"{super().description} in gear {self.gear}"


class AutomaticCar(Car):
    @property
    def current_speed(self) -> float:
        return self._current_speed

    @current_speed.setter
    def current_speed(self, value: float) -> None:
        self._current_speed = value
        self.gear = int(value / 10.0) + 1


def execute():
    some_vehicle = Vehicle()
    print(f"Vehicle: {some_vehicle.description}")

    tandem = Tandem()
    tandem.has_basket = True
    tandem.current_number_of_passengers = 2
    tandem.current_speed = 22.0
    print(f"Tandem: {tandem.description}")

    Train().make_noise()

    car = Car()
    car.current_speed = 25.0
    car.gear = 3
    print(f"Car: {car.description}")

    automatic = AutomaticCar()
    automatic.current_speed = 35.0
    print(f"AutomaticCar: {automatic.description}")
    print([cls.__name__ for cls in AutomaticCar.__mro__])
    print(isinstance(automatic, Vehicle), issubclass(Train, Car))


EXAMPLE_UNIT = ExampleUnit(
    id="inheritance.subclassing",
    title="Subclassing and overriding",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Vehicle: traveling at 0.0 miles per hour",
        "Tandem: traveling at 22.0 miles per hour",
        "Choo Choo",
        "Car: traveling at 25.0 miles per hour in gear 3",
        "AutomaticCar: traveling at 35.0 miles per hour in gear 4",
        "['AutomaticCar', 'Car', 'Vehicle', 'object']",
        "True False",
    ),
)

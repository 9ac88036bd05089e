"""
Optional chaining

Python has no ``?.`` operator. Walking an attribute path that may hit
``None`` is done with a small helper, with ``and`` chains, or with the
walrus operator inside a condition.
"""

from dataclasses import dataclass, field
from typing import Optional

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.optional_chaining import TOPIC


def chain(obj, *attributes):
    """Follow ``attributes`` from ``obj``, stopping at the first None."""
    for name in attributes:
        if obj is None:
            return None
        obj = getattr(obj, name)
    return obj


@dataclass
class Room:
    name: str


@dataclass
class Address:
    building_name: Optional[str] = None
    building_number: Optional[str] = None
    street: Optional[str] = None

    def building_identifier(self) -> Optional[str]:
        if self.building_name is not None:
            return self.building_name
        if self.building_number is not None and self.street is not None:
            return f"{self.building_number} {self.street}"
        return None


@dataclass
class Residence:
    rooms: list = field(default_factory=list)
    address: Optional[Address] = None

    @property
    def number_of_rooms(self) -> int:
        return len(self.rooms)


@dataclass
class Person:
    residence: Optional[Residence] = None


def execute():
    john = Person()
    room_count = chain(john, "residence", "number_of_rooms")
    if room_count is None:
        print("Unable to retrieve the number of rooms.")

    john.residence = Residence(rooms=[Room("Living Room"), Room("Kitchen")])
    room_count = chain(john, "residence", "number_of_rooms")
    print(f"John's residence has {room_count} room(s).")

    street = john.residence and john.residence.address and john.residence.address.street
    print(street)

    john.residence.address = Address(building_number="29", street="Acacia Road")
    if (address := chain(john, "residence", "address")) and (
        identifier := address.building_identifier()
    ):
        print(f"John's building identifier is {identifier}.")

    test_scores = {"Dave": [86, 82, 84], "Bev": [79, 94, 81]}
    test_scores["Dave"][0] = 91
    test_scores["Bev"][0] += 1
    if (scores := test_scores.get("Brian")) is not None:
        scores[0] = 72
    print(test_scores)
    print(getattr(john, "pet", None))


EXAMPLE_UNIT = ExampleUnit(
    id="optional_chaining.optional_chaining",
    title="Walking through optional values",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Unable to retrieve the number of rooms.",
        "John's residence has 2 room(s).",
        "None",
        "John's building identifier is 29 Acacia Road.",
        "{'Dave': [91, 82, 84], 'Bev': [80, 94, 81]}",
        "None",
    ),
)

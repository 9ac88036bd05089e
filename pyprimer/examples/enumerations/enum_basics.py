"""Defining enums, looking members up by value and matching on them."""

from enum import Enum

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.enumerations import TOPIC


class CompassPoint(Enum):
    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class Planet(Enum):
    MERCURY = 1
    VENUS = 2
    EARTH = 3
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8


def execute():
    direction_to_head = CompassPoint.WEST
    print(direction_to_head)
    print(direction_to_head.name, direction_to_head.value)
    print(CompassPoint("south"))
    print(len(CompassPoint))
    print(", ".join(point.name.title() for point in CompassPoint))

    match direction_to_head:
        case CompassPoint.NORTH:
            print("Lots of planets have a north")
        case CompassPoint.SOUTH:
            print("Watch out for penguins")
        case CompassPoint.EAST:
            print("Where the sun rises")
        case CompassPoint.WEST:
            print("Where the skies are blue")

    possible_planet = Planet(7)
    print(possible_planet.name)
    try:
        Planet(11)
    except ValueError as exc:
        print(exc)


EXAMPLE_UNIT = ExampleUnit(
    id="enumerations.enum_basics",
    title="Enum basics",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "CompassPoint.WEST",
        "WEST west",
        "CompassPoint.SOUTH",
        "4",
        "North, South, East, West",
        "Where the skies are blue",
        "URANUS",
        "11 is not a valid Planet",
    ),
)

"""Flag and IntEnum members combine and compare like integers."""

from enum import Flag, IntEnum, auto

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.enumerations import TOPIC


class Permission(Flag):
    READ = auto()
    WRITE = auto()
    EXECUTE = auto()


class Priority(IntEnum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3


def execute():
    print(Permission.READ.value, Permission.WRITE.value, Permission.EXECUTE.value)

    read_write = Permission.READ | Permission.WRITE
    print(Permission.WRITE in read_write, Permission.EXECUTE in read_write)
    print(read_write.value)

    print(Priority.HIGH > Priority.LOW, Priority.MEDIUM + 1)
    print([priority.name for priority in sorted([Priority.HIGH, Priority.LOW, Priority.MEDIUM])])


EXAMPLE_UNIT = ExampleUnit(
    id="enumerations.flags",
    title="Flags and integer enums",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "1 2 4",
        "True False",
        "3",
        "True 3",
        "['LOW', 'MEDIUM', 'HIGH']",
    ),
)

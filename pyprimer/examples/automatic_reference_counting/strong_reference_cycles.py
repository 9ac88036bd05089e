"""
Reference cycles

Reference counting frees an object the moment its count drops to zero,
but two objects pointing at each other keep each other alive until the
cycle collector runs. Making one side a weak reference removes the
cycle.
"""

import gc
import weakref

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.automatic_reference_counting import TOPIC


class StrongPerson:
    def __init__(self, name: str):
        self.name = name
        self.apartment = None


class StrongApartment:
    def __init__(self, unit: str):
        self.unit = unit
        self.tenant = None


class Person:
    def __init__(self, name: str):
        self.name = name
        self.apartment = None

    def __del__(self):
        print(f"{self.name} is being deinitialized")


class Apartment:
    def __init__(self, unit: str):
        self.unit = unit
        self._tenant = None

    @property
    def tenant(self):
        return self._tenant() if self._tenant is not None else None

    @tenant.setter
    def tenant(self, person) -> None:
        self._tenant = weakref.ref(person)

    def __del__(self):
        print(f"Apartment {self.unit} is being deinitialized")


def execute():
    gc_was_enabled = gc.isenabled()
    gc.disable()
    try:
        john = StrongPerson("John Appleseed")
        unit4a = StrongApartment("4A")
        john.apartment = unit4a
        unit4a.tenant = john
        john_ref = weakref.ref(john)
        del john, unit4a
        print(f"alive after del: {john_ref() is not None}")
        gc.collect()
        print(f"alive after collect: {john_ref() is not None}")
    finally:
        if gc_was_enabled:
            gc.enable()

    john = Person("John Appleseed")
    unit4a = Apartment("4A")
    john.apartment = unit4a
    unit4a.tenant = john
    del john
    print(unit4a.tenant)
    del unit4a


EXAMPLE_UNIT = ExampleUnit(
    id="automatic_reference_counting.strong_reference_cycles",
    title="Strong reference cycles",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "alive after del: True",
        "alive after collect: False",
        "John Appleseed is being deinitialized",
        "None",
        "Apartment 4A is being deinitialized",
    ),
)

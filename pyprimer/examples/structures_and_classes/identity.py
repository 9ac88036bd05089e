"""Object identity with id() and the is operator."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.structures_and_classes import TOPIC


def execute():
    a = [1, 2, 3]
    b = a
    c = list(a)
    print(f"id(a) = {id(a)}")
    print(f"id(b) = {id(b)}")
    print(f"id(c) = {id(c)}")
    print(a is b, a is c, a == c)


EXAMPLE_UNIT = ExampleUnit(
    id="structures_and_classes.identity",
    title="Object identity",
    topic=TOPIC,
    body=execute,
    description="Object ids change from run to run, so this example declares no expected output.",
)

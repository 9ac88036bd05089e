"""Functions parameterized over a TypeVar."""

from typing import Optional, Sequence, Tuple, TypeVar

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.generics import TOPIC

T = TypeVar("T")


def swap_two_values(a: T, b: T) -> Tuple[T, T]:
    return b, a


def find_index(value_to_find: T, array: Sequence[T]) -> Optional[int]:
    for index, value in enumerate(array):
        if value == value_to_find:
            return index
    return None


def execute():
    some_int = 3
    another_int = 107
    some_int, another_int = swap_two_values(some_int, another_int)
    print(f"some_int is now {some_int}, and another_int is now {another_int}")

    some_string, another_string = swap_two_values("hello", "world")
    print(some_string, another_string)

    strings = ["cat", "dog", "llama", "parakeet", "terrapin"]
    found_index = find_index("llama", strings)
    if found_index is not None:
        print(f"The index of llama is {found_index}")

    print(find_index(9.3, [3.14159, 0.1, 0.25]))
    print(find_index("Andrea", ["Mike", "Malcolm", "Andrea"]))


EXAMPLE_UNIT = ExampleUnit(
    id="generics.generic_functions",
    title="Generic functions",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "some_int is now 107, and another_int is now 3",
        "world hello",
        "The index of llama is 2",
        "None",
        "2",
    ),
)

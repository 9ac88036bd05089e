"""Extending int by subclassing and extending functions with singledispatch."""

from functools import singledispatch

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.extensions import TOPIC


class RepeatingInt(int):
    def repetitions(self, task) -> None:
        for _ in range(self):
            task()

    def squared(self) -> "RepeatingInt":
        return RepeatingInt(self * self)

    def __getitem__(self, digit_index: int) -> int:
        return (self // 10 ** digit_index) % 10

    @property
    def kind(self) -> str:
        if self == 0:
            return "0"
        return "+" if self > 0 else "-"


@singledispatch
def describe(value) -> str:
    return f"something else: {value!r}"


@describe.register
def _(value: int) -> str:
    return f"int: {value}"


@describe.register
def _(value: float) -> str:
    return f"float: {value}"


@describe.register
def _(value: list) -> str:
    return f"list of {len(value)} items"


def execute():
    RepeatingInt(3).repetitions(lambda: print("Hello!"))
    print(RepeatingInt(3).squared())

    number = RepeatingInt(746381295)
    print(number[0], number[1], number[2], number[8], number[9])

    numbers = [3, 19, -27, 0, -6, 0, 7]
    print(" ".join(RepeatingInt(n).kind for n in numbers))

    for value in (10, 2.5, [1, 2], "x"):
        print(describe(value))


EXAMPLE_UNIT = ExampleUnit(
    id="extensions.single_dispatch",
    title="Subclassing int and single dispatch",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Hello!",
        "Hello!",
        "Hello!",
        "9",
        "5 9 2 7 0",
        "+ + - 0 - 0 +",
        "int: 10",
        "float: 2.5",
        "list of 2 items",
        "something else: 'x'",
    ),
)

"""Bounded and constrained TypeVars."""

from typing import Any, AnyStr, Iterable, Protocol, TypeVar

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.generics import TOPIC


class Comparable(Protocol):
    def __lt__(self, other: Any) -> bool:
        ...


CT = TypeVar("CT", bound=Comparable)


def largest(items: Iterable[CT]) -> CT:
    iterator = iter(items)
    try:
        best = next(iterator)
    except StopIteration:
        raise ValueError("largest() of an empty iterable") from None
    for item in iterator:
        if best < item:
            best = item
    return best


def concat(first: AnyStr, second: AnyStr) -> AnyStr:
    return first + second


def execute():
    print(largest([3, 17, 5]))
    print(largest(["pear", "apple", "fig"]))
    print(concat("ab", "cd"), concat(b"ab", b"cd"))
    print(CT.__bound__.__name__, set(AnyStr.__constraints__) == {str, bytes})

    try:
        largest([])
    except ValueError as exc:
        print(exc)


EXAMPLE_UNIT = ExampleUnit(
    id="generics.bounded_type_vars",
    title="Type constraints",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "17",
        "pear",
        "abcd b'abcd'",
        "Comparable True",
        "largest() of an empty iterable",
    ),
)

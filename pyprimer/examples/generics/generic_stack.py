"""
Generic types

``Generic[T]`` makes a class subscriptable for type checkers. The
runtime object is the same class whatever ``T`` is.
"""

from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.generics import TOPIC

T = TypeVar("T")


class Stack(Generic[T]):
    def __init__(self, items: Iterable[T] = ()):
        self._items: List[T] = list(items)

    def push(self, item: T) -> None:
        self._items.append(item)

    def pop(self) -> T:
        return self._items.pop()

    @property
    def top(self) -> Optional[T]:
        return self._items[-1] if self._items else None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)


def all_items_match(first: Iterable[T], second: Iterable[T]) -> bool:
    first_items = list(first)
    second_items = list(second)
    if len(first_items) != len(second_items):
        return False
    return all(a == b for a, b in zip(first_items, second_items))


def execute():
    stack_of_strings: Stack[str] = Stack()
    for word in ("uno", "dos", "tres", "cuatro"):
        stack_of_strings.push(word)
    print(stack_of_strings.pop())

    top_item = stack_of_strings.top
    if top_item is not None:
        print(f"The top item on the stack is {top_item}.")
    print(len(stack_of_strings))

    array_of_strings = ["uno", "dos", "tres"]
    if all_items_match(stack_of_strings, array_of_strings):
        print("All items match.")
    else:
        print("Not all items match.")

    print(Stack[int]().top, type(Stack[int]()) is Stack)


EXAMPLE_UNIT = ExampleUnit(
    id="generics.generic_stack",
    title="A generic stack",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "cuatro",
        "The top item on the stack is tres.",
        "3",
        "All items match.",
        "None True",
    ),
)

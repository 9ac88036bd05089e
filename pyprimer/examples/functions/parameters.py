"""Default, variadic, keyword-only and positional-only parameters."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.functions import TOPIC


def greet(person, already_greeted=False):
    if already_greeted:
        return f"Hello again, {person}!"
    return f"Hello, {person}!"


def min_max(array):
    if not array:
        return None
    return min(array), max(array)


def arithmetic_mean(*numbers):
    return sum(numbers) / len(numbers)


def make_tag(name, /, *, css_class="plain"):
    return f"<{name} class={css_class!r}>"


def execute():
    print(greet("Anna"))
    print(greet("Tim", already_greeted=True))

    bounds = min_max([8, -6, 2, 109, 3, 71])
    print(f"min is {bounds[0]} and max is {bounds[1]}")
    print(min_max([]))

    print(arithmetic_mean(1, 2, 3, 4, 5))
    print(arithmetic_mean(3, 8.25, 18.75))

    print(make_tag("div", css_class="note"))
    try:
        make_tag(name="div")
    except TypeError:
        print("name is positional-only")

    options = {"css_class": "warning"}
    print(make_tag("p", **options))


EXAMPLE_UNIT = ExampleUnit(
    id="functions.parameters",
    title="Function parameters",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Hello, Anna!",
        "Hello again, Tim!",
        "min is -6 and max is 109",
        "None",
        "3.0",
        "10.0",
        "<div class='note'>",
        "name is positional-only",
        "<p class='warning'>",
    ),
)

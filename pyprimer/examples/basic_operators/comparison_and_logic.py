"""Comparisons, conditional expressions and short-circuit logic."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.basic_operators import TOPIC


def execute():
    print(1 == 1, 2 != 1, 2 > 1, 1 < 2, 1 >= 1, 2 <= 1)

    # tuples compare element by element
    print((1, "zebra") < (2, "apple"))
    print((3, "apple") < (3, "bird"))
    print((4, "dog") == (4, "dog"))

    x = 5
    print(1 < x < 10)

    content_height = 40
    has_header = True
    row_height = content_height + (50 if has_header else 20)
    print(row_height)

    default_color = "red"
    user_defined_color = None
    print(user_defined_color or default_color)
    print("" or "fallback", 0 or 7)

    entered_door_code = True
    passed_retina_scan = False
    has_door_key = False
    knows_override_password = True
    if entered_door_code and passed_retina_scan or has_door_key or knows_override_password:
        print("Welcome!")
    else:
        print("ACCESS DENIED")


EXAMPLE_UNIT = ExampleUnit(
    id="basic_operators.comparison_and_logic",
    title="Comparison and logical operators",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "True True True True True False",
        "True",
        "True",
        "True",
        "True",
        "90",
        "red",
        "fallback 7",
        "Welcome!",
    ),
)

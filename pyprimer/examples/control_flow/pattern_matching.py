"""
Structural pattern matching

``match`` compares a subject against literal, capture, sequence, mapping
and class patterns. Guards add an extra condition to a case.
"""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.control_flow import TOPIC


def describe_point(point):
    match point:
        case (0, 0):
            return f"{point} is at the origin"
        case (x, 0):
            return f"({x}, 0) is on the x-axis"
        case (0, y):
            return f"(0, {y}) is on the y-axis"
        case (x, y) if -2 <= x <= 2 and -2 <= y <= 2:
            return f"({x}, {y}) is inside the box"
        case (x, y):
            return f"({x}, {y}) is outside of the box"


def classify(character):
    match character.lower():
        case "a" | "e" | "i" | "o" | "u":
            return "vowel"
        case letter if letter.isalpha():
            return "consonant"
        case _:
            return "not a letter"


def handle(event):
    match event:
        case {"type": "click", "x": x, "y": y}:
            return f"click at {x},{y}"
        case {"type": "key", "key": key}:
            return f"key {key!r}"
        case {"type": other}:
            return f"unhandled {other}"


def execute():
    for point in ((0, 0), (2, 0), (0, -3), (1, 1), (5, -4)):
        print(describe_point(point))

    print(", ".join(f"{character}: {classify(character)}" for character in "aZ?"))

    events = (
        {"type": "click", "x": 3, "y": 4},
        {"type": "key", "key": "q"},
        {"type": "scroll"},
    )
    for event in events:
        print(handle(event))


EXAMPLE_UNIT = ExampleUnit(
    id="control_flow.pattern_matching",
    title="Structural pattern matching",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "(0, 0) is at the origin",
        "(2, 0) is on the x-axis",
        "(0, -3) is on the y-axis",
        "(1, 1) is inside the box",
        "(5, -4) is outside of the box",
        "a: vowel, Z: consonant, ?: not a letter",
        "click at 3,4",
        "key 'q'",
        "unhandled scroll",
    ),
)

"""
Absent values

``None`` stands in for "no value". Functions that can fail to produce a
result return ``None`` and callers test for it with ``is None``.
"""

from typing import Optional

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.the_basics import TOPIC


def parse_int(text: str) -> Optional[int]:
    try:
        return int(text)
    except ValueError:
        return None


def execute():
    possible_number = "123"
    converted_number = parse_int(possible_number)
    print(converted_number)

    server_response_code: Optional[int] = 404
    server_response_code = None
    print(server_response_code)

    survey_answer: Optional[str] = None
    print(survey_answer is None)

    for text in ("42", "forty-two"):
        number = parse_int(text)
        if number is not None:
            print(f'"{text}" has an integer value of {number}')
        else:
            print(f'"{text}" could not be converted to an integer')

    nickname = None
    full_name = "John Appleseed"
    print(f"Hi {nickname or full_name}")


EXAMPLE_UNIT = ExampleUnit(
    id="the_basics.none_values",
    title="None and optional values",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "123",
        "None",
        "True",
        '"42" has an integer value of 42',
        '"forty-two" could not be converted to an integer',
        "Hi John Appleseed",
    ),
)

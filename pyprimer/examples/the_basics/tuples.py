"""Grouping values with tuples and named tuples."""

from collections import namedtuple

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.the_basics import TOPIC

HttpStatus = namedtuple("HttpStatus", ["code", "description"])


def execute():
    http_404_error = (404, "Not Found")

    status_code, status_message = http_404_error
    print(f"The status code is {status_code}")
    print(f"The status message is {status_message}")

    just_the_status_code, _ = http_404_error
    print(f"The status code is {just_the_status_code}")
    print(f"The status code is {http_404_error[0]}")

    http_200_status = HttpStatus(code=200, description="OK")
    print(f"The status code is {http_200_status.code}")
    print(http_200_status)


EXAMPLE_UNIT = ExampleUnit(
    id="the_basics.tuples",
    title="Tuples and unpacking",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "The status code is 404",
        "The status message is Not Found",
        "The status code is 404",
        "The status code is 404",
        "The status code is 200",
        "HttpStatus(code=200, description='OK')",
    ),
)

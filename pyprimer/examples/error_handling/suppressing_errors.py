"""Converting errors to None, suppressing them, and try/else."""

from contextlib import suppress

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.error_handling import TOPIC


def try_optional(function, *args):
    try:
        return function(*args)
    except ValueError:
        return None


def execute():
    print(try_optional(int, "42"), try_optional(int, "forty-two"))

    settings = {}
    with suppress(KeyError):
        del settings["missing"]
    print("continued after missing key")

    try:
        value = int("7")
    except ValueError:
        print("not a number")
    else:
        print(f"parsed {value}")

    candidates = (try_optional(int, text) for text in ("a", "12", "13"))
    print(next((value for value in candidates if value is not None), None))


EXAMPLE_UNIT = ExampleUnit(
    id="error_handling.suppressing_errors",
    title="Optional results and suppressed errors",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "42 None",
        "continued after missing key",
        "parsed 7",
        "12",
    ),
)

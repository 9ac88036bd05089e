"""finally, ExitStack callbacks and exception chaining."""

from contextlib import ExitStack

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.error_handling import TOPIC


def process_file(name: str) -> str:
    print(f"open {name}")
    try:
        print(f"read {name}")
        return "contents"
    finally:
        print(f"close {name}")


def load_config(text: str) -> int:
    try:
        return int(text)
    except ValueError as exc:
        raise RuntimeError("could not parse config") from exc


def execute():
    print(process_file("notes.txt"))

    # Callbacks run in reverse order of registration.
    with ExitStack() as stack:
        for name in ("first", "second", "third"):
            stack.callback(print, f"cleanup {name}")
        print("working")

    try:
        load_config("x")
    except RuntimeError as exc:
        print(exc)
        print(type(exc.__cause__).__name__)


EXAMPLE_UNIT = ExampleUnit(
    id="error_handling.cleanup_actions",
    title="Cleanup actions",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "open notes.txt",
        "read notes.txt",
        "close notes.txt",
        "contents",
        "working",
        "cleanup third",
        "cleanup second",
        "cleanup first",
        "could not parse config",
        "ValueError",
    ),
)

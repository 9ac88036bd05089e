"""
Call-site information and code-generating decorators

``inspect`` exposes the calling frame, so a helper can report which
function called it. Decorators wrap a function at definition time,
which covers much of what other languages do with macros.
"""

from dataclasses import dataclass
from functools import wraps
import inspect

from pyprimer.examples.api import example
from pyprimer.examples.functions import TOPIC


def log_debug_info(message: str) -> None:
    caller = inspect.currentframe().f_back
    print(f"Debug Log: {message} (in {caller.f_code.co_name})")


@dataclass
class Person:
    name: str
    age: int

    def greet(self) -> None:
        log_debug_info("Greeting started")
        print(f"Hello, my name is {self.name} and I am {self.age} years old.")
        log_debug_info("Greeting finished")


def traced(function):
    @wraps(function)
    def wrapper(*args):
        print(f"calling {function.__name__}{args}")
        result = function(*args)
        print(f"{function.__name__} returned {result}")
        return result

    return wrapper


@traced
def add(a: int, b: int) -> int:
    return a + b


@example(
    "functions.call_site_info",
    "Caller information and decorators",
    TOPIC,
    expected_output=(
        "Debug Log: Greeting started (in greet)",
        "Hello, my name is Alice and I am 30 years old.",
        "Debug Log: Greeting finished (in greet)",
        "calling add(2, 3)",
        "add returned 5",
        "add True",
    ),
)
def call_site_info():
    Person(name="Alice", age=30).greet()
    add(2, 3)
    print(add.__name__, inspect.unwrap(add) is not add)


EXAMPLE_UNIT = call_site_info

"""Closures look names up when they run, not when they are created."""

from functools import partial
import operator

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.closures import TOPIC


def execute():
    multipliers = [lambda x: x * i for i in range(3)]
    print([multiply(10) for multiply in multipliers])

    # a default argument is evaluated once, when the lambda is created
    multipliers = [lambda x, i=i: x * i for i in range(3)]
    print([multiply(10) for multiply in multipliers])

    multipliers = [partial(operator.mul, i) for i in range(3)]
    print([multiply(10) for multiply in multipliers])

    completion_handlers = []

    def register_completion_handler(handler):
        completion_handlers.append(handler)

    x = 10
    register_completion_handler(lambda: x)
    x = 200
    print(completion_handlers[0]())


EXAMPLE_UNIT = ExampleUnit(
    id="closures.late_binding",
    title="Late binding of captured names",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "[20, 20, 20]",
        "[0, 10, 20]",
        "[0, 10, 20]",
        "200",
    ),
)

"""Functions are values: assign them, pass them and return them."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.functions import TOPIC


def add_two_ints(a, b):
    return a + b


def multiply_two_ints(a, b):
    return a * b


def print_math_result(math_function, a, b):
    print(f"Result: {math_function(a, b)}")


def choose_step_function(backward):
    def step_forward(value):
        return value + 1

    def step_backward(value):
        return value - 1

    return step_backward if backward else step_forward


def execute():
    math_function = add_two_ints
    print(f"Result: {math_function(2, 3)}")
    math_function = multiply_two_ints
    print(f"Result: {math_function(2, 3)}")

    print_math_result(add_two_ints, 3, 5)

    current_value = 3
    move_nearer_to_zero = choose_step_function(backward=current_value > 0)
    print("Counting to zero:")
    while current_value != 0:
        print(f"{current_value}...")
        current_value = move_nearer_to_zero(current_value)
    print("zero!")


EXAMPLE_UNIT = ExampleUnit(
    id="functions.first_class_functions",
    title="Functions as values",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Result: 5",
        "Result: 6",
        "Result: 8",
        "Counting to zero:",
        "3...",
        "2...",
        "1...",
        "zero!",
    ),
)

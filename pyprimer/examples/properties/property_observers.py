"""Running code before and after an attribute changes."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.properties import TOPIC


class StepCounter:
    def __init__(self):
        self._total_steps = 0

    @property
    def total_steps(self) -> int:
        return self._total_steps

    @total_steps.setter
    def total_steps(self, new_total: int) -> None:
        print(f"About to set total_steps to {new_total}")
        old_value = self._total_steps
        self._total_steps = new_total
        if new_total > old_value:
            print(f"Added {new_total - old_value} steps")


def execute():
    step_counter = StepCounter()
    step_counter.total_steps = 200
    step_counter.total_steps = 360
    step_counter.total_steps = 896


EXAMPLE_UNIT = ExampleUnit(
    id="properties.property_observers",
    title="Property observers",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "About to set total_steps to 200",
        "Added 200 steps",
        "About to set total_steps to 360",
        "Added 160 steps",
        "About to set total_steps to 896",
        "Added 536 steps",
    ),
)

"""
Read-only subscripts

``__getitem__`` receives either an int or a ``slice``; supporting both
makes a computed sequence feel like a list.
"""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.subscripts import TOPIC


class TimesTable:
    def __init__(self, multiplier: int):
        self.multiplier = multiplier

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(13))]
        return self.multiplier * index


def execute():
    three_times_table = TimesTable(multiplier=3)
    print(f"six times three is {three_times_table[6]}")
    print(three_times_table[1:5])
    print(TimesTable(12)[::3])


EXAMPLE_UNIT = ExampleUnit(
    id="subscripts.times_table",
    title="Subscripts with slices",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "six times three is 18",
        "[3, 6, 9, 12]",
        "[0, 36, 72, 108, 144]",
    ),
)

"""
Aliasing

Names are references. Two names bound to one list see each other's
changes, default argument values are created once, and multiplying a
list of lists copies references rather than rows.
"""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.memory_safety import TOPIC


def balance(x: int, y: int) -> tuple:
    total = x + y
    return total // 2, total - total // 2


def execute():
    a = [1, 2, 3]
    b = a
    b.append(4)
    print(a)

    def append_to(item, target=[]):
        target.append(item)
        return target

    print(append_to(1))
    print(append_to(2))

    def append_to_fresh(item, target=None):
        if target is None:
            target = []
        target.append(item)
        return target

    print(append_to_fresh(1))
    print(append_to_fresh(2))

    grid = [[0] * 3] * 3
    grid[0][0] = 1
    print(grid)
    grid = [[0] * 3 for _ in range(3)]
    grid[0][0] = 1
    print(grid)

    player_one_score = 42
    player_two_score = 30
    player_one_score, player_two_score = balance(player_one_score, player_two_score)
    print(player_one_score, player_two_score)


EXAMPLE_UNIT = ExampleUnit(
    id="memory_safety.aliasing",
    title="Aliasing and shared mutable state",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "[1, 2, 3, 4]",
        "[1]",
        "[1, 2]",
        "[1]",
        "[2]",
        "[[1, 0, 0], [1, 0, 0], [1, 0, 0]]",
        "[[1, 0, 0], [0, 0, 0], [0, 0, 0]]",
        "36 36",
    ),
)

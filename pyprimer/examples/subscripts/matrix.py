"""Tuple subscripts with __getitem__ and __setitem__."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.subscripts import TOPIC


class Matrix:
    def __init__(self, rows: int, columns: int):
        self.rows = rows
        self.columns = columns
        self.grid = [0.0] * (rows * columns)

    def index_is_valid(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def _offset(self, key) -> int:
        row, column = key
        if not self.index_is_valid(row, column):
            raise IndexError("Index out of range")
        return row * self.columns + column

    def __getitem__(self, key) -> float:
        return self.grid[self._offset(key)]

    def __setitem__(self, key, value: float) -> None:
        self.grid[self._offset(key)] = value


def execute():
    matrix = Matrix(rows=2, columns=2)
    matrix[0, 1] = 1.5
    matrix[1, 0] = 3.2
    print(matrix.grid)
    print(matrix[1, 0])

    try:
        matrix[2, 2]
    except IndexError as exc:
        print(f"{type(exc).__name__}: {exc}")


EXAMPLE_UNIT = ExampleUnit(
    id="subscripts.matrix",
    title="Multi-dimensional subscripts",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "[0.0, 1.5, 3.2, 0.0]",
        "3.2",
        "IndexError: Index out of range",
    ),
)

"""Equality, hashing, ordering and container protocols."""

from dataclasses import dataclass

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.protocols import TOPIC


@dataclass(frozen=True, order=True)
class Version:
    major: int
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class Countdown:
    def __init__(self, start: int):
        self.start = start

    def __iter__(self):
        current = self.start
        while current > 0:
            yield current
            current -= 1

    def __len__(self) -> int:
        return max(self.start, 0)

    def __contains__(self, value) -> bool:
        return isinstance(value, int) and 0 < value <= self.start


def execute():
    versions = [Version(1, 2, 0), Version(1, 0, 5), Version(2), Version(1, 2, 0)]
    print([str(v) for v in sorted(set(versions))])
    print(max(versions), Version(1, 2) == Version(1, 2, 0))

    countdown = Countdown(3)
    print(list(countdown), len(countdown), 2 in countdown)
    print(bool(Countdown(0)))


EXAMPLE_UNIT = ExampleUnit(
    id="protocols.dunder_protocols",
    title="Special method protocols",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "['1.0.5', '1.2.0', '2.0.0']",
        "2.0.0 True",
        "[3, 2, 1] 3 True",
        "False",
    ),
)

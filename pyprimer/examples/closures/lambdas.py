"""Lambdas as sort keys, and with map, filter and reduce."""

from functools import reduce

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.closures import TOPIC

DIGIT_NAMES = {
    0: "Zero", 1: "One", 2: "Two", 3: "Three", 4: "Four",
    5: "Five", 6: "Six", 7: "Seven", 8: "Eight", 9: "Nine",
}


def execute():
    names = ["Chris", "Alex", "Ewa", "Barry", "Daniella"]
    print(sorted(names, reverse=True))
    # sorting is stable, equal keys keep their original order
    print(sorted(names, key=len))
    print(sorted(names, key=lambda name: name[-1]))

    numbers = [16, 58, 510]
    strings = list(map(lambda number: "".join(DIGIT_NAMES[int(digit)] for digit in str(number)), numbers))
    print(strings)

    print(list(filter(lambda number: number % 3 == 0, range(1, 10))))
    print(reduce(lambda total, number: total + number, [1, 2, 3, 4], 0))


EXAMPLE_UNIT = ExampleUnit(
    id="closures.lambdas",
    title="Lambda expressions",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "['Ewa', 'Daniella', 'Chris', 'Barry', 'Alex']",
        "['Ewa', 'Alex', 'Chris', 'Barry', 'Daniella']",
        "['Ewa', 'Daniella', 'Chris', 'Alex', 'Barry']",
        "['OneSix', 'FiveEight', 'FiveOneZero']",
        "[3, 6, 9]",
        "10",
    ),
)

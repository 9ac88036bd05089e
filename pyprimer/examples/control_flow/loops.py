"""for and while loops, and the else clause of a loop."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.control_flow import TOPIC


def snakes_and_ladders() -> int:
    final_square = 25
    board = [0] * (final_square + 1)
    board[3], board[6], board[9], board[10] = 8, 11, 9, 2
    board[14], board[19], board[22], board[24] = -10, -11, -2, -8

    square = 0
    dice_roll = 0
    rolls = 0
    while square < final_square:
        dice_roll += 1
        if dice_roll == 7:
            dice_roll = 1
        square += dice_roll
        if square < len(board):
            square += board[square]
        rolls += 1
    return rolls


def execute():
    number_of_legs = {"spider": 8, "ant": 6, "cat": 4}
    for animal_name, leg_count in number_of_legs.items():
        print(f"{animal_name}s have {leg_count} legs")

    base = 3
    power = 10
    answer = 1
    for _ in range(power):
        answer *= base
    print(f"{base} to the power of {power} is {answer}")

    print(f"Game over after {snakes_and_ladders()} rolls")

    for candidate in (9, 13):
        for divisor in range(2, candidate):
            if candidate % divisor == 0:
                print(f"{candidate} equals {divisor} * {candidate // divisor}")
                break
        else:
            print(f"{candidate} is a prime number")


EXAMPLE_UNIT = ExampleUnit(
    id="control_flow.loops",
    title="Loops",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "spiders have 8 legs",
        "ants have 6 legs",
        "cats have 4 legs",
        "3 to the power of 10 is 59049",
        "Game over after 10 rolls",
        "9 equals 3 * 3",
        "13 is a prime number",
    ),
)

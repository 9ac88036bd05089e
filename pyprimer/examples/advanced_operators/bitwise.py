"""Bitwise operators and masks."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.advanced_operators import TOPIC


def execute():
    initial_bits = 0b00001111
    inverted_bits = ~initial_bits & 0xFF
    print(f"{inverted_bits:08b}")

    first_six_bits = 0b11111100
    last_six_bits = 0b00111111
    print(f"{first_six_bits & last_six_bits:08b}")
    print(f"{0b10110010 | 0b01011110:08b}")
    print(f"{0b00010100 ^ 0b00000101:08b}")

    shifted = [(4 << n) & 0xFF for n in (1, 2, 5, 6)]
    print(*shifted)
    print(4 >> 2, -4 >> 1)

    pink = 0xCC6699
    red_component = (pink & 0xFF0000) >> 16
    green_component = (pink & 0x00FF00) >> 8
    blue_component = pink & 0x0000FF
    print(red_component, green_component, blue_component)


EXAMPLE_UNIT = ExampleUnit(
    id="advanced_operators.bitwise",
    title="Bitwise operators",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "11110000",
        "00111100",
        "11111110",
        "00010001",
        "8 16 128 0",
        "1 -2",
        "204 102 153",
    ),
)

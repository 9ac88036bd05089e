"""
Overflow

Python integers grow without bound. Fixed-width wrapping has to be
asked for with a mask, and checked arithmetic raises OverflowError.
"""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.advanced_operators import TOPIC

UINT8_MAX = 0xFF


def wrap_uint8(value: int) -> int:
    return value & UINT8_MAX


def wrap_int8(value: int) -> int:
    return (value + 128) % 256 - 128


def checked_uint8_add(a: int, b: int) -> int:
    result = a + b
    if result > UINT8_MAX:
        raise OverflowError("UInt8 addition overflowed")
    return result


def execute():
    print(2 ** 64)
    print(wrap_uint8(UINT8_MAX + 1))
    print(wrap_uint8(0 - 1))
    print(wrap_int8(-128 - 1))

    try:
        checked_uint8_add(250, 10)
    except OverflowError as exc:
        print(exc)

    print(1e308 * 10)
    print((2 ** 64).bit_length())


EXAMPLE_UNIT = ExampleUnit(
    id="advanced_operators.overflow",
    title="Integer overflow",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "18446744073709551616",
        "0",
        "255",
        "127",
        "UInt8 addition overflowed",
        "inf",
        "65",
    ),
)

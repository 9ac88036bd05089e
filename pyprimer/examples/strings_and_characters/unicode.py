"""
Unicode

A ``str`` is a sequence of code points. Visually identical text can be
spelled with different code points, so compare normalized forms.
"""

import unicodedata

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.strings_and_characters import TOPIC


def execute():
    e_acute = "\u00e9"
    combined_e_acute = "e\u0301"
    print(len(e_acute), len(combined_e_acute))
    print(e_acute == combined_e_acute)
    print(unicodedata.normalize("NFC", combined_e_acute) == e_acute)

    cafe = "caf\u00e9"
    print(len(cafe), len(cafe.encode("utf-8")))
    print([hex(ord(character)) for character in "Dog"])
    print(unicodedata.name("\u2665"))
    print("\u2665".encode("utf-8"))


EXAMPLE_UNIT = ExampleUnit(
    id="strings_and_characters.unicode",
    title="Unicode code points and normalization",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "1 2",
        "False",
        "True",
        "4 5",
        "['0x44', '0x6f', '0x67']",
        "BLACK HEART SUIT",
        "b'\\xe2\\x99\\xa5'",
    ),
)

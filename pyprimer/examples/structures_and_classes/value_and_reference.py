"""Copies versus shared references."""

import copy
from dataclasses import dataclass, field
from typing import Optional

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.structures_and_classes import TOPIC


@dataclass
class Resolution:
    width: int = 0
    height: int = 0


@dataclass
class VideoMode:
    resolution: Resolution = field(default_factory=Resolution)
    interlaced: bool = False
    frame_rate: float = 0.0
    name: Optional[str] = None


def execute():
    hd = Resolution(width=1920, height=1080)
    cinema = copy.copy(hd)
    cinema.width = 2048
    print(f"cinema is now {cinema.width} pixels wide")
    print(f"hd is still {hd.width} pixels wide")

    ten_eighty = VideoMode()
    ten_eighty.resolution = hd
    ten_eighty.interlaced = True
    ten_eighty.name = "1080i"
    ten_eighty.frame_rate = 25.0

    also_ten_eighty = ten_eighty
    also_ten_eighty.frame_rate = 30.0
    print(f"The frame_rate property of ten_eighty is now {ten_eighty.frame_rate}")
    print(ten_eighty is also_ten_eighty)

    # == compares field values, is compares identity
    same_size = Resolution(1920, 1080)
    print(hd == same_size, hd is same_size)


EXAMPLE_UNIT = ExampleUnit(
    id="structures_and_classes.value_and_reference",
    title="Value and reference semantics",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "cinema is now 2048 pixels wide",
        "hd is still 1920 pixels wide",
        "The frame_rate property of ten_eighty is now 30.0",
        "True",
        "True False",
    ),
)

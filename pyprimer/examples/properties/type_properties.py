"""Class-level attributes shared by every instance."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.properties import TOPIC


def execute():
    # Defined per run so the shared maximum starts from zero every time.
    class AudioChannel:
        threshold_level = 10
        max_input_level_for_all_channels = 0

        def __init__(self):
            self._current_level = 0

        @property
        def current_level(self) -> int:
            return self._current_level

        @current_level.setter
        def current_level(self, value: int) -> None:
            self._current_level = min(value, AudioChannel.threshold_level)
            if self._current_level > AudioChannel.max_input_level_for_all_channels:
                AudioChannel.max_input_level_for_all_channels = self._current_level

    left_channel = AudioChannel()
    right_channel = AudioChannel()

    left_channel.current_level = 7
    print(left_channel.current_level, AudioChannel.max_input_level_for_all_channels)

    right_channel.current_level = 11
    print(right_channel.current_level, AudioChannel.max_input_level_for_all_channels)
    print(left_channel.max_input_level_for_all_channels)


EXAMPLE_UNIT = ExampleUnit(
    id="properties.type_properties",
    title="Class attributes",
    topic=TOPIC,
    body=execute,
    expected_output=("7 7", "10 10", "10"),
)

"""Leading underscores, name mangling and read-only properties."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.access_control import TOPIC


class TrackedString:
    def __init__(self):
        self._number_of_edits = 0
        self.__value = ""

    @property
    def number_of_edits(self) -> int:
        return self._number_of_edits

    @property
    def value(self) -> str:
        return self.__value

    @value.setter
    def value(self, new_value: str) -> None:
        self.__value = new_value
        self._number_of_edits += 1


def execute():
    string_to_edit = TrackedString()
    string_to_edit.value = "This string will be tracked."
    string_to_edit.value += " This edit will increment number_of_edits."
    string_to_edit.value += " So will this one."
    print(f"The number of edits is {string_to_edit.number_of_edits}")

    print(hasattr(string_to_edit, "__value"))
    print("_TrackedString__value" in vars(string_to_edit))

    try:
        string_to_edit.number_of_edits = 0
    except AttributeError:
        print("number_of_edits is read-only")


EXAMPLE_UNIT = ExampleUnit(
    id="access_control.naming_conventions",
    title="Naming conventions and name mangling",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "The number of edits is 3",
        "False",
        "True",
        "number_of_edits is read-only",
    ),
)

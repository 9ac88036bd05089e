"""Inherited and overridden initializers with default arguments."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.initialization import TOPIC


class Vehicle:
    def __init__(self):
        self.number_of_wheels = 0

    @property
    def description(self) -> str:
        return f"{self.number_of_wheels} wheel(s)"


class Bicycle(Vehicle):
    def __init__(self):
        super().__init__()
        self.number_of_wheels = 2


class Hoverboard(Vehicle):
    def __init__(self, color: str):
        super().__init__()
        self.color = color

    @property
    def description(self) -> str:
        return f"{super().description} in a beautiful {self.color}"


class Food:
    def __init__(self, name: str = "[Unnamed]"):
        self.name = name


class RecipeIngredient(Food):
    def __init__(self, name: str = "[Unnamed]", quantity: int = 1):
        super().__init__(name)
        self.quantity = quantity


class ShoppingListItem(RecipeIngredient):
    def __init__(self, name: str = "[Unnamed]", quantity: int = 1):
        super().__init__(name, quantity)
        self.purchased = False

    @property
    def description(self) -> str:
        mark = "[x]" if self.purchased else "[ ]"
        return f"{self.quantity} x {self.name} {mark}"


def execute():
    print(f"Bicycle: {Bicycle().description}")
    print(f"Hoverboard: {Hoverboard(color='silver').description}")

    mystery_meat = Food()
    print(mystery_meat.name)

    breakfast_list = [
        ShoppingListItem(),
        ShoppingListItem(name="Bacon"),
        ShoppingListItem(name="Eggs", quantity=6),
    ]
    breakfast_list[0].name = "Orange juice"
    breakfast_list[0].purchased = True
    for item in breakfast_list:
        print(item.description)


EXAMPLE_UNIT = ExampleUnit(
    id="initialization.initializer_inheritance",
    title="Initializer inheritance",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Bicycle: 2 wheel(s)",
        "Hoverboard: 0 wheel(s) in a beautiful silver",
        "[Unnamed]",
        "1 x Orange juice [x]",
        "1 x Bacon [ ]",
        "6 x Eggs [ ]",
    ),
)

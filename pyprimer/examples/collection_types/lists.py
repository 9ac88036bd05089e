"""Creating, modifying and iterating lists."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.collection_types import TOPIC


def execute():
    shopping_list = ["Eggs", "Milk"]
    print(f"The shopping list contains {len(shopping_list)} items.")

    shopping_list.append("Flour")
    shopping_list += ["Baking Powder"]
    shopping_list += ["Chocolate Spread", "Cheese", "Butter"]
    print(shopping_list[0])

    shopping_list[0] = "Six eggs"
    shopping_list[4:7] = ["Bananas", "Apples"]
    print(shopping_list)

    shopping_list.insert(0, "Maple Syrup")
    maple_syrup = shopping_list.pop(0)
    print(maple_syrup, len(shopping_list))

    apples = shopping_list.pop()
    print(apples)

    for index, value in enumerate(shopping_list, start=1):
        print(f"Item {index}: {value}")


EXAMPLE_UNIT = ExampleUnit(
    id="collection_types.lists",
    title="Lists",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "The shopping list contains 2 items.",
        "Eggs",
        "['Six eggs', 'Milk', 'Flour', 'Baking Powder', 'Bananas', 'Apples']",
        "Maple Syrup 6",
        "Apples",
        "Item 1: Six eggs",
        "Item 2: Milk",
        "Item 3: Flour",
        "Item 4: Baking Powder",
        "Item 5: Bananas",
    ),
)

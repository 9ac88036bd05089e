"""Custom exception hierarchies and handling them by type."""

from dataclasses import dataclass

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.error_handling import TOPIC


class VendingMachineError(Exception):
    pass


class InvalidSelection(VendingMachineError):
    pass


class OutOfStock(VendingMachineError):
    pass


class InsufficientFunds(VendingMachineError):
    def __init__(self, coins_needed: int):
        super().__init__(f"{coins_needed} more coins needed")
        self.coins_needed = coins_needed


@dataclass
class Item:
    price: int
    count: int


class VendingMachine:
    def __init__(self):
        self.inventory = {
            "Candy Bar": Item(price=12, count=7),
            "Chips": Item(price=10, count=4),
            "Pretzels": Item(price=7, count=11),
        }
        self.coins_deposited = 0

    def vend(self, name: str) -> None:
        item = self.inventory.get(name)
        if item is None:
            raise InvalidSelection(name)
        if item.count <= 0:
            raise OutOfStock(name)
        if item.price > self.coins_deposited:
            raise InsufficientFunds(item.price - self.coins_deposited)

        self.coins_deposited -= item.price
        item.count -= 1
        print(f"Dispensing {name}")


FAVORITE_SNACKS = {
    "Alice": "Chips",
    "Bob": "Licorice",
    "Eve": "Pretzels",
}


def buy_favorite_snack(person: str, machine: VendingMachine) -> None:
    machine.vend(FAVORITE_SNACKS.get(person, "Candy Bar"))


def execute():
    machine = VendingMachine()
    machine.coins_deposited = 8
    for person in ("Alice", "Bob", "Eve"):
        try:
            buy_favorite_snack(person, machine)
        except InvalidSelection:
            print("Invalid Selection.")
        except OutOfStock:
            print("Out of Stock.")
        except InsufficientFunds as exc:
            print(f"Insufficient funds. Please insert an additional {exc.coins_needed} coins.")
    print(f"{machine.coins_deposited} coin(s) left")

    try:
        machine.vend("Gum")
    except VendingMachineError as exc:
        print(f"{type(exc).__name__}: {exc}")


EXAMPLE_UNIT = ExampleUnit(
    id="error_handling.vending_machine",
    title="Raising and catching custom exceptions",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Insufficient funds. Please insert an additional 2 coins.",
        "Invalid Selection.",
        "Dispensing Pretzels",
        "1 coin(s) left",
        "InvalidSelection: Gum",
    ),
)

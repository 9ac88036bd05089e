"""
Deinitialization

CPython calls ``__del__`` as soon as the last reference to an object
goes away. Here a player hands its coins back to the bank when it
leaves the game.
"""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.deinitialization import TOPIC


def execute():
    # Classes are built per run so the bank always starts full.
    class Bank:
        coins_in_bank = 10_000

        @classmethod
        def distribute(cls, number_of_coins_requested: int) -> int:
            number_of_coins_to_vend = min(number_of_coins_requested, cls.coins_in_bank)
            cls.coins_in_bank -= number_of_coins_to_vend
            return number_of_coins_to_vend

        @classmethod
        def receive(cls, coins: int) -> None:
            cls.coins_in_bank += coins

    class Player:
        def __init__(self, name: str, coins: int):
            self.name = name
            self.coins_in_purse = Bank.distribute(coins)

        def win(self, coins: int) -> None:
            self.coins_in_purse += Bank.distribute(coins)

        def __del__(self):
            Bank.receive(self.coins_in_purse)
            print(f"{self.name} has left the game")

    player_one = Player("PlayerOne", coins=100)
    print(f"A new player has joined the game with {player_one.coins_in_purse} coins")
    print(f"There are now {Bank.coins_in_bank} coins left in the bank")

    player_one.win(2_000)
    print(f"PlayerOne won 2000 coins & now has {player_one.coins_in_purse} coins")
    print(f"The bank now only has {Bank.coins_in_bank} coins left")

    del player_one
    print(f"The bank now has {Bank.coins_in_bank} coins")


EXAMPLE_UNIT = ExampleUnit(
    id="deinitialization.finalizers",
    title="__del__ and the bank",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "A new player has joined the game with 100 coins",
        "There are now 9900 coins left in the bank",
        "PlayerOne won 2000 coins & now has 2100 coins",
        "The bank now only has 7900 coins left",
        "PlayerOne has left the game",
        "The bank now has 10000 coins",
    ),
)

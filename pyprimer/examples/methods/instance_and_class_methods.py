"""Instance methods, classmethods and staticmethods."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.methods import TOPIC


class Counter:
    def __init__(self):
        self.count = 0

    def increment(self, by: int = 1) -> None:
        self.count += by

    def reset(self) -> None:
        self.count = 0


def execute():
    counter = Counter()
    counter.increment()
    counter.increment(by=5)
    print(counter.count)
    counter.reset()
    print(counter.count)

    class LevelTracker:
        highest_unlocked_level = 1

        def __init__(self):
            self.current_level = 1

        @classmethod
        def unlock(cls, level: int) -> None:
            if level > cls.highest_unlocked_level:
                cls.highest_unlocked_level = level

        @staticmethod
        def is_unlocked(level: int) -> bool:
            return level <= LevelTracker.highest_unlocked_level

        def advance(self, level: int) -> bool:
            if LevelTracker.is_unlocked(level):
                self.current_level = level
                return True
            return False

    class Player:
        def __init__(self, name: str):
            self.player_name = name
            self.tracker = LevelTracker()

        def complete(self, level: int) -> None:
            LevelTracker.unlock(level + 1)
            self.tracker.advance(level + 1)

    player = Player("Argyrios")
    player.complete(1)
    print(f"highest unlocked level is now {LevelTracker.highest_unlocked_level}")

    player = Player("Beto")
    if player.tracker.advance(6):
        print("player is now on level 6")
    else:
        print("level 6 hasn't yet been unlocked")


EXAMPLE_UNIT = ExampleUnit(
    id="methods.instance_and_class_methods",
    title="Instance, class and static methods",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "6",
        "0",
        "highest unlocked level is now 2",
        "level 6 hasn't yet been unlocked",
    ),
)

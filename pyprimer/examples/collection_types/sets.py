"""Set operations and membership."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.collection_types import TOPIC


def execute():
    odd_digits = {1, 3, 5, 7, 9}
    even_digits = {0, 2, 4, 6, 8}
    single_digit_prime_numbers = {2, 3, 5, 7}

    # sets are unordered, sort them before printing
    print(sorted(odd_digits | even_digits))
    print(sorted(odd_digits & even_digits))
    print(sorted(odd_digits - single_digit_prime_numbers))
    print(sorted(odd_digits ^ single_digit_prime_numbers))

    house_animals = {"dog", "cat"}
    farm_animals = {"cow", "chicken", "sheep", "dog", "cat"}
    city_animals = {"pigeon", "mouse"}
    print(house_animals <= farm_animals)
    print(farm_animals >= house_animals)
    print(farm_animals.isdisjoint(city_animals))

    favorite_genres = {"Rock", "Classical", "Hip hop"}
    favorite_genres.add("Jazz")
    favorite_genres.discard("Rock")
    print(sorted(favorite_genres))


EXAMPLE_UNIT = ExampleUnit(
    id="collection_types.sets",
    title="Sets",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "[0, 1, 2, 3, 4, 5, 6, 7, 8, 9]",
        "[]",
        "[1, 9]",
        "[1, 2, 9]",
        "True",
        "True",
        "True",
        "['Classical', 'Hip hop', 'Jazz']",
    ),
)

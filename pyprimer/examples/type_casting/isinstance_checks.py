"""Checking and narrowing types at runtime."""

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.type_casting import TOPIC


class MediaItem:
    def __init__(self, name: str):
        self.name = name


class Movie(MediaItem):
    def __init__(self, name: str, director: str):
        super().__init__(name)
        self.director = director


class Song(MediaItem):
    def __init__(self, name: str, artist: str):
        super().__init__(name)
        self.artist = artist


def build_library() -> list:
    return [
        Movie("Casablanca", "Michael Curtiz"),
        Song("Blue Suede Shoes", "Elvis Presley"),
        Movie("Citizen Kane", "Orson Welles"),
        Song("The One And Only", "Chesney Hawkes"),
        Song("Never Gonna Give You Up", "Rick Astley"),
    ]


def execute():
    library = build_library()

    movie_count = sum(1 for item in library if isinstance(item, Movie))
    song_count = sum(1 for item in library if isinstance(item, Song))
    print(f"Media library contains {movie_count} movies and {song_count} songs")

    for item in library:
        match item:
            case Movie(name=name, director=director):
                print(f"Movie: {name}, dir. {director}")
            case Song(name=name, artist=artist):
                print(f"Song: {name}, by {artist}")

    first = library[0]
    print(type(first).__name__, type(first) is MediaItem, isinstance(first, MediaItem))


EXAMPLE_UNIT = ExampleUnit(
    id="type_casting.isinstance_checks",
    title="Type checks and class patterns",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Media library contains 2 movies and 3 songs",
        "Movie: Casablanca, dir. Michael Curtiz",
        "Song: Blue Suede Shoes, by Elvis Presley",
        "Movie: Citizen Kane, dir. Orson Welles",
        "Song: The One And Only, by Chesney Hawkes",
        "Song: Never Gonna Give You Up, by Rick Astley",
        "Movie False True",
    ),
)

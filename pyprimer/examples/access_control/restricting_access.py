"""
Restricting access

Python trusts its callers, but ``__slots__``, read-only mapping views
and returning tuples instead of internal lists all narrow what outside
code can change.
"""

from types import MappingProxyType

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.access_control import TOPIC


class Point:
    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y


class Playlist:
    def __init__(self):
        self._songs = []

    def add(self, song: str) -> None:
        self._songs.append(song)

    @property
    def songs(self) -> tuple:
        return tuple(self._songs)


def execute():
    point = Point(1, 2)
    try:
        point.z = 3
    except AttributeError as exc:
        print(type(exc).__name__)

    config = {"debug": False}
    view = MappingProxyType(config)
    try:
        view["debug"] = True
    except TypeError:
        print("view is read-only")
    config["debug"] = True
    print(view["debug"])

    playlist = Playlist()
    playlist.add("Song A")
    playlist.add("Song B")
    print(playlist.songs)
    try:
        playlist.songs.append("Song C")
    except AttributeError as exc:
        print(type(exc).__name__)


EXAMPLE_UNIT = ExampleUnit(
    id="access_control.restricting_access",
    title="Limiting what callers can change",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "AttributeError",
        "view is read-only",
        "True",
        "('Song A', 'Song B')",
        "AttributeError",
    ),
)

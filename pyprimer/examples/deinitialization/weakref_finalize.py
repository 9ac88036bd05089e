"""Deterministic cleanup with context managers and weakref.finalize."""

import weakref

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.deinitialization import TOPIC


class Session:
    def __init__(self, name: str):
        self.name = name
        print(f"open {name}")
        self._finalizer = weakref.finalize(self, print, f"finalized {name}")

    @property
    def closed(self) -> bool:
        return not self._finalizer.alive

    def close(self) -> None:
        self._finalizer()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


def execute():
    with Session("alpha") as session:
        print(f"using {session.name}")
    print(session.closed)

    # Calling the finalizer twice is a no-op.
    session.close()

    beta = Session("beta")
    del beta


EXAMPLE_UNIT = ExampleUnit(
    id="deinitialization.weakref_finalize",
    title="Context managers and finalizers",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "open alpha",
        "using alpha",
        "finalized alpha",
        "True",
        "open beta",
        "finalized beta",
    ),
)

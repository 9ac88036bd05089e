"""Async generators, async iterators and async context managers."""

import asyncio
from contextlib import asynccontextmanager

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.concurrency import TOPIC


async def countdown(n: int):
    while n > 0:
        yield n
        n -= 1
        await asyncio.sleep(0)


class Ticker:
    def __init__(self, ticks: int):
        self.ticks = ticks
        self.current = 0

    def __aiter__(self):
        return self

    async def __anext__(self) -> str:
        if self.current >= self.ticks:
            raise StopAsyncIteration
        await asyncio.sleep(0)
        tick = f"tick {self.current}"
        self.current += 1
        return tick


@asynccontextmanager
async def connection():
    print("connect")
    try:
        yield "db"
    finally:
        print("disconnect")


async def main() -> None:
    print([n async for n in countdown(3)])
    async for tick in Ticker(3):
        print(tick)
    async with connection() as name:
        print(f"querying {name}")


def execute():
    asyncio.run(main())


EXAMPLE_UNIT = ExampleUnit(
    id="concurrency.async_iteration",
    title="Async iteration",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "[3, 2, 1]",
        "tick 0",
        "tick 1",
        "tick 2",
        "connect",
        "querying db",
        "disconnect",
    ),
)

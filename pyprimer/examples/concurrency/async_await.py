"""
async and await

Coroutines run on an event loop started by ``asyncio.run``.
``gather`` keeps results in argument order whatever order the work
finishes in; ``wait_for`` bounds a wait and tasks can be cancelled.
"""

import asyncio

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.concurrency import TOPIC


async def download_photo(name: str, delay: float = 0.0) -> str:
    await asyncio.sleep(delay)
    return f"{name}.jpg"


async def main() -> None:
    first = await download_photo("Winter")
    print(f"first photo: {first}")

    photos = await asyncio.gather(
        download_photo("Winter", 0.02),
        download_photo("Sunrise", 0.01),
        download_photo("Beach"),
    )
    print(photos)

    try:
        await asyncio.wait_for(asyncio.sleep(1), timeout=0.01)
    except asyncio.TimeoutError:
        print("timed out")

    task = asyncio.create_task(asyncio.sleep(10))
    await asyncio.sleep(0)
    task.cancel()
    try:
        await task
    except asyncio.CancelledError:
        print("task cancelled")
    print(task.cancelled())


def execute():
    asyncio.run(main())


EXAMPLE_UNIT = ExampleUnit(
    id="concurrency.async_await",
    title="Coroutines, gather and cancellation",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "first photo: Winter.jpg",
        "['Winter.jpg', 'Sunrise.jpg', 'Beach.jpg']",
        "timed out",
        "task cancelled",
        "True",
    ),
)

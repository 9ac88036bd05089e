"""Guarding shared state in coroutines with asyncio.Lock."""

import asyncio

from pyprimer.examples.api import ExampleUnit
from pyprimer.examples.concurrency import TOPIC


class TemperatureLogger:
    def __init__(self, label: str, measurement: int):
        self.label = label
        self.measurements = [measurement]
        self.max = measurement
        self._lock = asyncio.Lock()

    async def update(self, measurement: int) -> None:
        async with self._lock:
            self.measurements.append(measurement)
            await asyncio.sleep(0)
            if measurement > self.max:
                self.max = measurement


async def main() -> None:
    logger = TemperatureLogger("Outdoors", 25)
    await asyncio.gather(*(logger.update(m) for m in (27, 22, 30, 24)))
    print(f"{logger.label}: {logger.measurements} max {logger.max}")

    state = {"count": 0}
    lock = asyncio.Lock()

    async def increment(times: int) -> None:
        for _ in range(times):
            async with lock:
                value = state["count"]
                await asyncio.sleep(0)
                state["count"] = value + 1

    await asyncio.gather(*(increment(10) for _ in range(10)))
    print(f"count: {state['count']}")


def execute():
    asyncio.run(main())


EXAMPLE_UNIT = ExampleUnit(
    id="concurrency.actor_isolation",
    title="Isolating mutable state",
    topic=TOPIC,
    body=execute,
    expected_output=(
        "Outdoors: [25, 27, 22, 30, 24] max 30",
        "count: 100",
    ),
)

"""Coroutines, tasks and locks with asyncio."""

TOPIC = "Concurrency"

"""Closures and the names they capture."""

TOPIC = "Closures"

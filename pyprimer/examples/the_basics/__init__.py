"""The basics: names, numbers, tuples and ``None``."""

TOPIC = "The Basics"

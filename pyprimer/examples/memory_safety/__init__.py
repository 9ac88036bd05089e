"""Aliasing and mutating shared objects."""

TOPIC = "Memory Safety"

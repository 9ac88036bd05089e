"""Strings, formatting and Unicode."""

TOPIC = "Strings and Characters"

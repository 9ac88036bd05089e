"""Loops, conditionals and structural pattern matching."""

TOPIC = "Control Flow"

"""Value and reference semantics of Python objects."""

TOPIC = "Structures and Classes"

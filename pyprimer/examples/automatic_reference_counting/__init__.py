"""Reference counting, cycles and weak references."""

TOPIC = "Automatic Reference Counting"

"""Walking attribute chains that may contain ``None``."""

TOPIC = "Optional Chaining"

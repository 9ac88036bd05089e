"""Adding behaviour to existing types."""

TOPIC = "Extensions"

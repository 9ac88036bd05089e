"""Function parameters, return values and functions as values."""

TOPIC = "Functions"

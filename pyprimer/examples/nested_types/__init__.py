"""Classes and enums defined inside other classes."""

TOPIC = "Nested Types"

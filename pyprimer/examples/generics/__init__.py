"""Type variables and generic classes."""

TOPIC = "Generics"

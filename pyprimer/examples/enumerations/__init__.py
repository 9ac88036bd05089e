"""The enum module and dataclass-based sum types."""

TOPIC = "Enumerations"

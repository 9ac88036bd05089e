"""``__init__``, alternate constructors and validation."""

TOPIC = "Initialization"

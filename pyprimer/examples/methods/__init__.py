"""Instance methods, class methods and returning updated copies."""

TOPIC = "Methods"

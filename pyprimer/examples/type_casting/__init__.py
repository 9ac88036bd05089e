"""Runtime type checks, class patterns and conversions."""

TOPIC = "Type Casting"

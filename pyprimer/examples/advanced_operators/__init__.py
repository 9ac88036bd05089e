"""Bitwise operators, fixed-width arithmetic and operator overloading."""

TOPIC = "Advanced Operators"

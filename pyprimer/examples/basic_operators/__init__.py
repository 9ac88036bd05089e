"""Arithmetic, comparison, logical and range operators."""

TOPIC = "Basic Operators"

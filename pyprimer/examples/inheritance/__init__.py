"""Subclassing, overriding and the method resolution order."""

TOPIC = "Inheritance"

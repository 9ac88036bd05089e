"""Raising, catching and cleaning up after exceptions."""

TOPIC = "Error Handling"

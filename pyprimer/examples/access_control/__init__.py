"""Naming conventions, name mangling and read-only views."""

TOPIC = "Access Control"

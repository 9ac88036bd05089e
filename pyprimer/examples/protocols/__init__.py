"""Structural typing, abstract base classes and special methods."""

TOPIC = "Protocols"

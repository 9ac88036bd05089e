"""Custom indexing with ``__getitem__`` and ``__setitem__``."""

TOPIC = "Subscripts"

"""Lists, sets and dictionaries."""

TOPIC = "Collection Types"

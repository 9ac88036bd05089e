"""Properties, descriptors and class attributes."""

TOPIC = "Properties"

"""Object finalization and deterministic cleanup."""

TOPIC = "Deinitialization"

"""Internal byte-handling helpers."""

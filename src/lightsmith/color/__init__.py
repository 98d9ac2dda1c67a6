"""Color conversion helpers."""

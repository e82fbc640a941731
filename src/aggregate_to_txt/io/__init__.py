"""Low-level file reading helpers."""

"""GUI theme."""

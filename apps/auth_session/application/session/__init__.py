"""Session Application."""

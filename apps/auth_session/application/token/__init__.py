"""Token Application."""

"""Application Common."""

"""Application layer: rendering filter state."""

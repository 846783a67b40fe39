"""Application layer: end-to-end energy estimation."""

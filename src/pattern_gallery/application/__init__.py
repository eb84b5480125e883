"""Application layer - capability dispatch and usage scenarios."""

"""Interface layer - handlers that adapt CLI arguments to application calls."""

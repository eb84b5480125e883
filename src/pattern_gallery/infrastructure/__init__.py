"""Infrastructure layer - technical concerns and adapters to external services."""

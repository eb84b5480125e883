"""Domain layer - capability contracts, variants and selectors for each pattern."""

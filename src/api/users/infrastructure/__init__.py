"""Infrastructure adapters for the users context."""

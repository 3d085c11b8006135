"""Application layer for the users context."""

"""Application layer for the AI bounded context."""

"""AI bounded context - domain layer."""

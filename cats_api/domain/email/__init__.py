"""Email bounded context - domain layer."""

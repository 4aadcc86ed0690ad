"""Security-related helpers (rate limiting)."""

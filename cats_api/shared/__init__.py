"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Response envelope and route wrapping
- Business errors and exception translation
- HTTP middleware and rate limiting
- Logging configuration
"""

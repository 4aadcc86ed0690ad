"""
Application layer for the cats bounded context.

Use cases coordinate the cat repository and enforce the catalog rules.
No framework or infrastructure imports allowed.
"""

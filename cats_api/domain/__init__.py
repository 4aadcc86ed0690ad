"""
Domain layer package.

Contains entities, port interfaces and business errors.
No framework imports, no IO, no side effects.
"""

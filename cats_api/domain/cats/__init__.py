"""
Cats bounded context - domain layer.

Cat entity, repository port, and the business rules on names and ages.
"""

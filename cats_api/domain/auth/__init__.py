"""
Auth bounded context - domain layer.

Users, roles, credentials, and the ports for hashing, tokens and captchas.
"""

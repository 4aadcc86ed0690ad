"""
Application layer for the auth bounded context.

Registration, login, token authentication and email captchas.
"""

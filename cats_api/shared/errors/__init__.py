"""
Shared error handling package.

Business errors are raised by use cases and travel unmodified to the
exception translator, which turns every fault into exactly one response.
"""

from cats_api.shared.errors.business import BusinessError

__all__ = ["BusinessError"]

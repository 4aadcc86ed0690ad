"""
Rate limiting configuration.

Uses slowapi. ``SlowAPIMiddleware`` applies the default limit to every
route; the LLM-backed routes carry the heavy limit through
``@limiter.limit``. Exceeded limits raise ``RateLimitExceeded``, an HTTP
exception that the exception translator reports as a 429 protocol fault.
"""

from fastapi import FastAPI
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from cats_api.core.config import settings
from cats_api.shared.errors.handlers import ExceptionTranslator

DEFAULT_RATE_LIMIT = settings.rate_limit_default
HEAVY_RATE_LIMIT = settings.rate_limit_heavy

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[DEFAULT_RATE_LIMIT],
    enabled=settings.rate_limit_enabled,
)


def setup_rate_limiting(
    app: FastAPI, translator: ExceptionTranslator, app_limiter: Limiter = limiter
) -> None:
    """Enforce ``app_limiter`` on ``app`` and answer 429s through ``translator``.

    Call before adding the other middleware so the limit check runs
    innermost, behind error translation and request logging.
    """
    app.state.limiter = app_limiter
    # SlowAPIMiddleware calls this handler without awaiting it
    app.add_exception_handler(RateLimitExceeded, translator.translate)
    app.add_middleware(SlowAPIMiddleware)

"""Rate limiting for the parse routes (kept apart to avoid circular imports).

OUTLINER_NO_RATE_LIMIT=true   disable limiting (tests, trusted local use)
OUTLINER_PARSE_RATE_LIMIT     slowapi limit string, default "10/minute"
"""

import os

from fastapi import FastAPI
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

DEFAULT_PARSE_RATE_LIMIT = "10/minute"

_enabled = os.environ.get("OUTLINER_NO_RATE_LIMIT", "").lower() != "true"

PARSE_RATE_LIMIT = (
    os.environ.get("OUTLINER_PARSE_RATE_LIMIT", "").strip() or DEFAULT_PARSE_RATE_LIMIT
)

limiter = Limiter(key_func=get_remote_address, enabled=_enabled)


def install_rate_limiting(app: FastAPI) -> None:
    """Attach the limiter and its 429 handler to ``app``."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

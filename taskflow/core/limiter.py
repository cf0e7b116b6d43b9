"""Rate limiter instance for SlowAPI.

One global limit per client address, applied to every route by
SlowAPIMiddleware. The limit string is resolved from settings on each check
so tests can change it without re-importing.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from taskflow.core.config import get_settings


def global_limit() -> str:
    """E.g. ``"100 per 900 seconds"``."""
    return get_settings().rate_limit


limiter = Limiter(key_func=get_remote_address, default_limits=[global_limit])

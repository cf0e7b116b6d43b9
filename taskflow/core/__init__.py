"""Core: config, limiter, exception handlers, and application bootstrap.

Single place for settings and app-wide wiring.
"""

from taskflow.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]

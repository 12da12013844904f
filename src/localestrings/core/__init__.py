"""Core utilities shared across localization and runtime layers.

Exports:
    DepthGuard: Context manager for recursion depth limiting
    DepthLimitExceededError: Exception raised when depth limit exceeded
    is_babel_available: Whether the CLDR plural service can be used

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel
from .depth_guard import DepthGuard, DepthLimitExceededError

__all__ = [
    "BabelImportError",
    "DepthGuard",
    "DepthLimitExceededError",
    "is_babel_available",
    "require_babel",
]

"""CLI helpers for ROA.

URL sanitization for safe display, stderr message emitters with
emoji→ASCII fallbacks, and Click callbacks for repeatable NAME=VALUE options.
"""

from .db_url import sanitize_url
from .messages import error, success, warn
from .registry_loader import load_registry

__all__ = ["error", "load_registry", "sanitize_url", "success", "warn"]

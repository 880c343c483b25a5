"""Shared helpers for the ``brbs`` command line.

Password-safe URL rendering, stderr notices and the ``-L NAME=LEVEL``
option parser.
"""

from .db_url import sanitize_url
from .messages import error, success, warn

__all__ = ["error", "sanitize_url", "success", "warn"]

"""
Passage Core Package.

This package contains the helper layer shared by authentication strategies:
request-scoped option resolution, URL construction, callback method checks,
error normalization and redirects.
"""

__version__ = "0.1.0"

from .logging_config import get_logger, init_logging

__all__ = ["init_logging", "get_logger"]

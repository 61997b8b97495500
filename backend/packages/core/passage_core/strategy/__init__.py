"""
Strategy package.

Base class, registry, options resolution and the helpers strategies use.
"""

from . import helpers
from .base import Strategy
from .options import attach_request_options, build_request_options
from .registry import StrategyRegistry

__all__ = [
    "Strategy",
    "StrategyRegistry",
    "attach_request_options",
    "build_request_options",
    "helpers",
]

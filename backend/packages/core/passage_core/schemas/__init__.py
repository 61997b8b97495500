"""
Pydantic schemas shared by strategies and the HTTP pipeline.
"""

from .failure import ErrorEntry, Failure
from .options import RequestOptions

__all__ = ["ErrorEntry", "Failure", "RequestOptions"]

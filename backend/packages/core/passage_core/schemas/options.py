"""
Request options schema.

The typed form of the per-request options bag populated before any strategy
helper runs.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RequestOptions(BaseModel):
    """Resolved strategy options for a single request."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    strategy_name: str | None = None
    strategy: Any = None  # Strategy class or instance handling the request
    request_path: str | None = None
    callback_path: str | None = None
    callback_methods: list[str] | None = None
    options: dict[str, Any] = Field(default_factory=dict)

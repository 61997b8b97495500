"""
Failure schemas.

Structured records attached to a request when authentication does not succeed.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorEntry(BaseModel):
    """
    A single authentication error.

    ``message_key`` is meant for machines (translations, branching);
    ``message`` is human readable. Fields missing from the source value stay None.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    message_key: str | None = None
    message: str | None = None


class Failure(BaseModel):
    """Failure record for one authentication attempt."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    provider: str | None = None
    strategy: Any = None
    errors: list[ErrorEntry] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a JSON response, naming the strategy by its class."""
        strategy = self.strategy
        if strategy is not None and not isinstance(strategy, str):
            strategy = strategy.__name__ if isinstance(strategy, type) else type(strategy).__name__
        return {
            "provider": self.provider,
            "strategy": strategy,
            "errors": [error.model_dump() for error in self.errors],
        }

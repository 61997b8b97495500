"""
Base strategy interface.

This module defines the abstract base class for all authentication strategies.
"""

from abc import ABC, abstractmethod
from typing import Any

from starlette.requests import Request
from starlette.responses import Response


class Strategy(ABC):
    """
    Abstract base class for authentication strategies.

    A strategy implements the provider-specific request and callback phases and
    relies on ``passage_core.strategy.helpers`` for everything request-scoped.
    """

    def __init__(self, provider_name: str, config: dict[str, Any]) -> None:
        """
        Initialize strategy.

        Args:
            provider_name: Provider name from configuration (e.g., 'github').
            config: Provider-specific configuration dictionary.
        """
        self.provider_name = provider_name
        self.config = config

    def default_options(self) -> dict[str, Any]:
        """
        Options applied before provider configuration overrides.

        Returns:
            Default option values for this strategy.
        """
        return {}

    @abstractmethod
    async def handle_request(self, request: Request) -> Response | None:
        """
        Run the request phase.

        Args:
            request: Request with resolved options attached.

        Returns:
            Response that ends the pipeline (usually a redirect), or None to continue.
        """

    @abstractmethod
    async def handle_callback(self, request: Request) -> Response | None:
        """
        Run the callback phase.

        Strategies report problems with ``helpers.set_errors`` rather than raising.

        Args:
            request: Request with resolved options attached.

        Returns:
            Response that ends the pipeline, or None to continue.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(provider_name={self.provider_name!r})"

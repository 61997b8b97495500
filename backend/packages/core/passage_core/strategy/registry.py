"""
Strategy registry.

This module provides a factory for registering and creating strategies.
"""

from typing import Any

from passage_core.exceptions import UnknownStrategyError

from .base import Strategy


class StrategyRegistry:
    """
    Registry of strategy classes keyed by identifier.

    Identifiers are case-insensitive.
    """

    _STRATEGIES: dict[str, type[Strategy]] = {}

    @classmethod
    def create(
        cls, strategy_id: str, provider_name: str, config: dict[str, Any] | None = None
    ) -> Strategy:
        """
        Create strategy instance.

        Args:
            strategy_id: Registered strategy identifier (e.g., 'oauth').
            provider_name: Provider name the instance serves (e.g., 'github').
            config: Provider-specific configuration (optional).

        Returns:
            Instantiated strategy.

        Raises:
            UnknownStrategyError: If strategy_id is not registered.
        """
        strategy_class = cls._STRATEGIES.get(strategy_id.lower())

        if strategy_class is None:
            available = ", ".join(cls._STRATEGIES.keys()) or "none"
            raise UnknownStrategyError(f"Unknown strategy: {strategy_id}. Available: {available}")

        return strategy_class(provider_name, config or {})

    @classmethod
    def register(cls, strategy_id: str, strategy_class: type[Strategy]) -> None:
        """
        Register a strategy class.

        Args:
            strategy_id: Unique strategy identifier.
            strategy_class: Strategy class (must inherit from Strategy).

        Raises:
            TypeError: If strategy_class is not a Strategy subclass.
        """
        if not (isinstance(strategy_class, type) and issubclass(strategy_class, Strategy)):
            raise TypeError(f"{strategy_class!r} is not a Strategy subclass")
        cls._STRATEGIES[strategy_id.lower()] = strategy_class

    @classmethod
    def list_strategies(cls) -> list[str]:
        """
        List all registered strategies.

        Returns:
            List of strategy identifiers.
        """
        return list(cls._STRATEGIES.keys())

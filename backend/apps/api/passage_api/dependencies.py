"""
FastAPI dependencies.

Resolves the strategy for the requested provider and attaches its options to
the request.
"""

from typing import Any

from fastapi import HTTPException, Request, status

from passage_core.config import StrategySettings
from passage_core.exceptions import UnknownStrategyError
from passage_core.strategy import StrategyRegistry, attach_request_options, build_request_options
from passage_core.strategy.base import Strategy


def get_settings(request: Request) -> StrategySettings:
    """Settings the application was built with."""
    return request.app.state.settings


def get_provider_config(provider: str, request: Request) -> dict[str, Any]:
    """
    Get configuration for a provider.

    Raises:
        HTTPException: If the provider is not configured.
    """
    config = request.app.state.providers.get(provider)
    if config is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Unknown provider")
    return config


def get_strategy(provider: str, request: Request) -> Strategy:
    """
    Create the provider's strategy and attach resolved options to the request.

    Returns:
        Strategy instance for this request.

    Raises:
        HTTPException: If the provider or its strategy is unknown.
    """
    config = get_provider_config(provider, request)
    strategy_id = str(config.get("strategy", provider))
    overrides = {k: v for k, v in config.items() if k != "strategy"}

    try:
        strategy = StrategyRegistry.create(strategy_id, provider, overrides)
    except UnknownStrategyError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    options = build_request_options(provider, strategy, overrides, get_settings(request))
    attach_request_options(request, options)
    return strategy

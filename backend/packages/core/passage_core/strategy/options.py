"""
Request options resolution.

Merges provider configuration over defaults and attaches the result to the
request so the helpers can read it.
"""

from typing import Any

from starlette.requests import Request

from passage_core import get_logger
from passage_core.config import StrategySettings, strategy_settings
from passage_core.schemas import RequestOptions

from .base import Strategy
from .helpers import REQUEST_OPTIONS_SLOT

logger = get_logger(__name__)

# Keys consumed by the pipeline rather than passed to the strategy
_RESERVED_KEYS = ("strategy", "request_path", "callback_path", "callback_methods")


def build_request_options(
    strategy_name: str,
    strategy: Strategy,
    overrides: dict[str, Any] | None = None,
    settings: StrategySettings | None = None,
) -> RequestOptions:
    """
    Resolve the options for one provider.

    Args:
        strategy_name: Provider name (e.g., 'github').
        strategy: Strategy instance serving the provider.
        overrides: Provider configuration; may set request_path, callback_path,
            callback_methods and any strategy option.
        settings: Settings supplying defaults (global settings if omitted).

    Returns:
        Fully resolved request options.
    """
    settings = settings or strategy_settings
    overrides = overrides or {}

    base_path = settings.base_path.rstrip("/")
    request_path = overrides.get("request_path") or f"{base_path}/{strategy_name}"
    callback_path = overrides.get("callback_path") or f"{request_path.rstrip('/')}/callback"

    callback_methods = overrides.get("callback_methods")
    if callback_methods is None:
        callback_methods = settings.get_callback_methods()
    elif isinstance(callback_methods, str):
        callback_methods = callback_methods.split(",")
    callback_methods = [str(m).strip().upper() for m in callback_methods if str(m).strip()]

    merged = dict(strategy.default_options())
    merged.update({k: v for k, v in overrides.items() if k not in _RESERVED_KEYS})

    return RequestOptions(
        strategy_name=strategy_name,
        strategy=strategy,
        request_path=request_path,
        callback_path=callback_path,
        callback_methods=callback_methods,
        options=merged,
    )


def attach_request_options(request: Request, options: RequestOptions) -> Request:
    """Put resolved options in the request's private options bag."""
    setattr(request.state, REQUEST_OPTIONS_SLOT, options)
    logger.debug(
        "Request options attached",
        extra={"provider": options.strategy_name, "request_path": options.request_path},
    )
    return request

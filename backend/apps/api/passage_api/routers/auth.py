"""
Authentication router.

Runs the request and callback phases of the strategy configured for a provider.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.responses import Response

from passage_core import get_logger
from passage_core.exceptions import PassageError
from passage_core.strategy import helpers
from passage_core.strategy.base import Strategy

from ..dependencies import get_strategy

logger = get_logger(__name__)

router = APIRouter()

# Per-provider callback_methods decide which of these reach the callback phase
CALLBACK_ROUTE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@router.api_route("/{provider}", methods=["GET", "POST"])
async def request_phase(
    request: Request,
    strategy: Annotated[Strategy, Depends(get_strategy)],
) -> Response:
    """
    Start an authentication attempt.

    Returns:
        The strategy's response, usually a redirect to the identity provider.

    Raises:
        HTTPException: If the strategy produced no response or rejected the request.
    """
    try:
        response = await strategy.handle_request(request)
    except PassageError:
        raise
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if response is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
    return response


@router.api_route("/{provider}/callback", methods=CALLBACK_ROUTE_METHODS)
async def callback_phase(
    provider: str,
    request: Request,
    strategy: Annotated[Strategy, Depends(get_strategy)],
) -> Response:
    """
    Handle the identity provider's callback.

    Returns:
        The strategy's response if it produced one, 401 with the failure record
        if one was attached, otherwise 200.

    Raises:
        HTTPException: If the method is not an allowed callback method or the
            strategy rejected the request.
    """
    if not helpers.is_callback_method_allowed(request):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")

    try:
        response = await strategy.handle_callback(request)
    except PassageError:
        raise
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if response is not None:
        return response

    failure = helpers.get_failure(request)
    if failure is not None:
        logger.info(
            "Authentication failed",
            extra={"provider": provider, "error_keys": [e.message_key for e in failure.errors]},
        )
        return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content=failure.to_payload())

    return JSONResponse(content={"provider": helpers.strategy_name(request)})

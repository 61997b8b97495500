"""
Strategy helpers.

Helpers used inside strategy implementations to read the options resolved for
the current request, build request/callback URLs, check callback methods,
record failures and redirect.

The options bag is expected on ``request.state`` before any helper runs; the
helpers never substitute defaults of their own.
"""

import string
from collections.abc import Iterable, Mapping
from html import escape
from typing import Any
from urllib.parse import quote, urlencode, urlunsplit

from pydantic import ValidationError
from starlette.requests import Request
from starlette.responses import HTMLResponse

from passage_core import get_logger
from passage_core.exceptions import InvalidURLComponentsError, UnrecognizedErrorShapeError
from passage_core.schemas import ErrorEntry, Failure, RequestOptions

logger = get_logger(__name__)

REQUEST_OPTIONS_SLOT = "passage_request_options"
FAILURE_SLOT = "passage_failure"

_DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443}

QueryOptions = Mapping[str, Any] | Iterable[tuple[str, Any]]


def resolve(request: Request, key: str) -> Any:
    """
    Look up ``key`` in the request's options bag.

    Returns None when the bag is missing or the key is unset.
    """
    opts = getattr(request.state, REQUEST_OPTIONS_SLOT, None)
    if opts is None:
        return None
    if isinstance(opts, Mapping):
        return opts.get(key)
    if isinstance(opts, RequestOptions):
        return getattr(opts, key, None)
    return None


def strategy_name(request: Request) -> str | None:
    """Provider name as configured, e.g. ``github``."""
    return resolve(request, "strategy_name")


def strategy(request: Request) -> Any:
    """The strategy handling the request."""
    return resolve(request, "strategy")


def request_path(request: Request) -> str | None:
    """Path that triggers the request phase."""
    return resolve(request, "request_path")


def callback_path(request: Request) -> str | None:
    """Path that triggers the callback phase."""
    return resolve(request, "callback_path")


def allowed_callback_methods(request: Request) -> list[str] | None:
    """HTTP methods the callback phase accepts."""
    return resolve(request, "callback_methods")


def options(request: Request) -> dict[str, Any] | None:
    """Full strategy options passed in configuration."""
    return resolve(request, "options")


def build_url(request: Request, path: str | None, extra_query: QueryOptions | None = None) -> str:
    """
    Build an absolute URL on the current request's host and scheme.

    Args:
        request: Current request.
        path: Absolute path; None is treated as empty.
        extra_query: Query parameters, encoded in iteration order.

    Returns:
        Absolute URL string.

    Raises:
        InvalidURLComponentsError: If scheme or host is missing, or the port is invalid.
    """
    url = request.url
    scheme = str(url.scheme or "").lower()
    host = url.hostname
    try:
        port = url.port
    except ValueError as e:
        raise InvalidURLComponentsError("Cannot build URL: invalid port") from e

    if not scheme:
        raise InvalidURLComponentsError("Cannot build URL: request has no scheme")
    if not host:
        raise InvalidURLComponentsError("Cannot build URL: request has no host")
    if port is not None and not 0 < port < 65536:
        raise InvalidURLComponentsError(f"Cannot build URL: invalid port {port}")

    # IPv6 literals need brackets in the authority
    netloc = f"[{host}]" if ":" in host else host
    if port is not None and port != _DEFAULT_PORTS.get(scheme):
        netloc = f"{netloc}:{port}"

    path = path or ""
    if path and not path.startswith("/"):
        path = f"/{path}"

    if isinstance(extra_query, Mapping):
        pairs = list(extra_query.items())
    else:
        pairs = list(extra_query or [])
    return urlunsplit((scheme, netloc, path, urlencode(pairs), ""))


def request_url(request: Request, extra_query: QueryOptions | None = None) -> str:
    """Absolute URL of the request phase, with ``extra_query`` as query params."""
    return build_url(request, request_path(request), extra_query)


def callback_url(request: Request, extra_query: QueryOptions | None = None) -> str:
    """Absolute URL of the callback phase, with ``extra_query`` as query params."""
    return build_url(request, callback_path(request), extra_query)


def is_callback_method_allowed(request: Request) -> bool:
    """Whether the request method is one of the allowed callback methods."""
    allowed = allowed_callback_methods(request)
    if not allowed:
        return False
    method = str(request.method).upper()
    return method in {str(m).upper() for m in allowed}


def error(message_key: str, message: str) -> ErrorEntry:
    """
    Construct an error entry.

    Example:
        error("something_bad", "Something really bad happened")
    """
    return ErrorEntry(message_key=message_key, message=message)


def _is_pair_list(value: Any) -> bool:
    # An empty list is a pair list with no fields
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        return False
    return all(
        isinstance(pair, (list, tuple)) and len(pair) == 2 and isinstance(pair[0], str)
        for pair in value
    )


def _to_error_entry(item: Any) -> ErrorEntry:
    if isinstance(item, ErrorEntry):
        return item

    if isinstance(item, Mapping):
        fields = item
    elif _is_pair_list(item):
        fields = dict(item)
    else:
        raise UnrecognizedErrorShapeError(item)

    try:
        return ErrorEntry.model_validate(
            {key: fields[key] for key in ("message_key", "message") if key in fields}
        )
    except ValidationError as e:
        raise UnrecognizedErrorShapeError(item, "message_key and message must be strings") from e


def normalize_errors(errors: Any) -> list[ErrorEntry]:
    """
    Normalize error values into a list of ErrorEntry, preserving order.

    Accepts None, a single ErrorEntry or mapping, or a sequence whose items are
    ErrorEntry instances, mappings, or lists of ``(field, value)`` pairs.

    Raises:
        UnrecognizedErrorShapeError: If any value has an unsupported shape.
    """
    if errors is None:
        return []
    if isinstance(errors, ErrorEntry):
        return [errors]
    if isinstance(errors, Mapping):
        return [_to_error_entry(errors)]
    if isinstance(errors, (list, tuple)):
        return [_to_error_entry(item) for item in errors]
    raise UnrecognizedErrorShapeError(errors)


def set_errors(request: Request, errors: Any) -> Request:
    """
    Attach a failure with the given errors to the request.

    Call during the callback phase to fail the attempt. Replaces any failure
    already attached.

    Raises:
        UnrecognizedErrorShapeError: If an error value cannot be normalized.
    """
    failure = Failure(
        provider=strategy_name(request),
        strategy=strategy(request),
        errors=normalize_errors(errors),
    )
    setattr(request.state, FAILURE_SLOT, failure)

    logger.debug(
        "Authentication failure attached",
        extra={"provider": failure.provider, "error_count": len(failure.errors)},
    )
    return request


def get_failure(request: Request) -> Failure | None:
    """The failure attached to the request, if any."""
    return getattr(request.state, FAILURE_SLOT, None)


def redirect(request: Request, url: str) -> HTMLResponse:
    """
    Build a redirect response to ``url``.

    The returned response ends the pipeline for this request: callers send it
    as-is instead of running further stages. The status comes from
    ``request.state.status_code`` when set, otherwise 302. Characters outside
    ASCII are percent-encoded in the Location header; the body link keeps the
    original URL, HTML-escaped.
    """
    link = escape(url, quote=True)
    location = quote(url, safe=string.punctuation)
    body = f'<html><body>You are being <a href="{link}">redirected</a>.</body></html>'
    status_code = getattr(request.state, "status_code", None) or 302
    return HTMLResponse(content=body, status_code=status_code, headers={"location": location})

"""Global pytest fixtures for testing."""

import contextlib
from collections.abc import Callable
from typing import Any

import dotenv
import pytest
from starlette.requests import Request

from passage_core.schemas import RequestOptions
from passage_core.strategy.helpers import REQUEST_OPTIONS_SLOT

with contextlib.suppress(OSError):
    dotenv.load_dotenv()

_DEFAULT_PORTS = {"http": 80, "https": 443}


def build_request(
    method: str = "GET",
    scheme: str = "https",
    host: str | None = "example.com",
    port: int | None = None,
    path: str = "/",
    options: RequestOptions | dict[str, Any] | None = None,
) -> Request:
    """
    Build a Starlette request from a raw ASGI scope.

    A None host produces a request without transport facts.
    """
    headers: list[tuple[bytes, bytes]] = []
    server = None
    if host is not None:
        port = port or _DEFAULT_PORTS.get(scheme)
        host_header = host if port == _DEFAULT_PORTS.get(scheme) else f"{host}:{port}"
        headers.append((b"host", host_header.encode("latin-1")))
        server = (host, port)

    scope = {
        "type": "http",
        "method": method,
        "scheme": scheme,
        "server": server,
        "path": path,
        "root_path": "",
        "query_string": b"",
        "headers": headers,
    }
    request = Request(scope)
    if options is not None:
        setattr(request.state, REQUEST_OPTIONS_SLOT, options)
    return request


@pytest.fixture
def make_request() -> Callable[..., Request]:
    """Factory for requests with optional options bag."""
    return build_request

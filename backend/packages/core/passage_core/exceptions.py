"""
Exception types raised by the strategy helper layer.

All of them subclass ``ValueError`` or ``LookupError`` so callers that already
handle the builtin types keep working.
"""


class PassageError(Exception):
    """Base class for errors raised by passage."""


class UnrecognizedErrorShapeError(PassageError, ValueError):
    """An error value could not be converted into an ErrorEntry."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        self.value = value
        detail = f"Unrecognized error shape: {type(value).__name__} {value!r}"
        if reason:
            detail = f"{detail} ({reason})"
        super().__init__(detail)


class InvalidURLComponentsError(PassageError, ValueError):
    """Request transport facts are not enough to build an absolute URL."""


class UnknownStrategyError(PassageError, LookupError):
    """No strategy is registered under the requested identifier."""

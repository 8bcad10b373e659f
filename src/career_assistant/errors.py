"""Exception hierarchy shared by the dispatcher, server and client layers."""

from __future__ import annotations


class CareerAssistantError(Exception):
    """Base class for all application errors."""


class ConfigurationError(CareerAssistantError):
    """Required configuration (e.g. the upstream API key) is missing."""


class UnknownRequestTypeError(CareerAssistantError):
    def __init__(self, request_type: object):
        self.request_type = request_type
        super().__init__(f"Invalid request type: {request_type!r}")


class InvalidContentError(CareerAssistantError):
    """Request content does not match the shape required by its type."""

    def __init__(self, message: str, details: list[dict] | None = None):
        self.details = details or []
        super().__init__(message)


class UpstreamError(CareerAssistantError):
    """The text-generation API call failed."""


class DecodeError(CareerAssistantError):
    """A dispatcher payload could not be decoded into a typed result."""

    def __init__(self, message: str, raw: str | None = None):
        self.raw = raw
        super().__init__(message)


class DispatcherError(CareerAssistantError):
    """The dispatcher endpoint answered with a non-success status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


class RequestInProgressError(CareerAssistantError):
    """A request is already in flight on this client."""


class AuthenticationError(CareerAssistantError):
    pass

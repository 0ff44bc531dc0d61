"""Error taxonomy shared by the handler, the forwarder and the app."""
from __future__ import annotations


class RelayError(RuntimeError):
    pass


class ValidationError(RelayError):
    """Raised when the inbound prompt violates a precondition."""


class UpstreamError(RelayError):
    """Raised when the call to the generation API fails or is unusable."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ConfigError(RelayError):
    """Raised when required configuration is missing or invalid."""

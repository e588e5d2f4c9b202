"""Errors raised while handling a purge."""
from __future__ import annotations

__all__ = [
    "PurgeError",
    "ConfigurationError",
    "ProviderError",
    "MalformedRequestError",
    "WebhookRejectedError",
]


class PurgeError(Exception):
    """Base class for errors that fail a webhook request."""


class ConfigurationError(PurgeError):
    """Required settings are missing."""


class ProviderError(PurgeError):
    """The caching provider rejected the purge or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class MalformedRequestError(PurgeError):
    """The webhook body is not valid JSON."""


class WebhookRejectedError(PurgeError):
    """An injected request validator refused the webhook."""

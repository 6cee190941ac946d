"""
Error taxonomy shared by the dispatcher, the history stores and the API.

Every error carries the HTTP status the API reports it with.
"""


class DumbifyError(Exception):
    """Base exception for all errors raised by the Dumbify service."""

    status_code = 500


class ValidationError(DumbifyError):
    """Raised for missing or invalid input, before any I/O happens."""

    status_code = 400


class ConfigurationError(DumbifyError):
    """Raised when a required setting such as the API credential is absent."""


class UpstreamError(DumbifyError):
    """Raised when the completion API errors or returns no usable text."""


class PersistenceError(DumbifyError):
    """Raised when the explanation record store cannot be read or written."""

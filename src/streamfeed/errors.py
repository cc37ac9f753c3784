"""Exceptions raised by the Stream client."""

from __future__ import annotations


class StreamError(Exception):
    """Base class for every error raised by streamfeed."""


class ConfigurationError(StreamError, RuntimeError):
    """Required configuration (key, secret, base URL) is missing."""


class TransportError(StreamError):
    """The HTTP transport failed before a response was received.

    ``payload`` is the exception raised by the transport, untouched.
    """

    def __init__(self, payload: BaseException):
        super().__init__(str(payload) or type(payload).__name__)
        self.payload = payload


class DecodeError(StreamError, ValueError):
    """The response body is not valid JSON."""

    def __init__(self, message: str, body: bytes):
        super().__init__(message)
        self.body = body


class SignatureVerificationError(StreamError):
    def __init__(self, message: str, cause: Exception | None = None):
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.cause = cause


__all__ = [
    "StreamError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "SignatureVerificationError",
]

"""Python client for the Stream feeds API."""

from __future__ import annotations

from .client import AsyncStreamClient, StreamClient
from .config import DEFAULT_API_BASE_URL, StreamConfig
from .errors import (
    ConfigurationError,
    DecodeError,
    SignatureVerificationError,
    StreamError,
    TransportError,
)
from .request import (
    Feed,
    KeySecretAuth,
    Request,
    TokenAuth,
    with_body,
    with_headers,
    with_options,
    with_params,
    with_token,
)
from .token import TokenScope

__version__ = "0.4.0"

__all__ = [
    "StreamClient",
    "AsyncStreamClient",
    "StreamConfig",
    "DEFAULT_API_BASE_URL",
    "StreamError",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "SignatureVerificationError",
    "Feed",
    "Request",
    "KeySecretAuth",
    "TokenAuth",
    "TokenScope",
    "with_body",
    "with_headers",
    "with_options",
    "with_params",
    "with_token",
]

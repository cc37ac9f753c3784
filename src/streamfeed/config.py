"""Client configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_API_BASE_URL = "https://api.stream-io-api.com/api/v1.0/"
REGION_API_BASE_URL = "https://{region}-api.stream-io-api.com/api/v1.0/"
DEFAULT_TIMEOUT = 60.0


@dataclass(frozen=True)
class StreamConfig:
    """Stream API credentials and endpoint.

    Built once at startup and handed to the clients. When ``region`` is set
    and ``base_url`` is left out, the regional endpoint is used.
    """

    api_key: str | None = None
    api_secret: str | None = None
    base_url: str | None = None
    region: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> StreamConfig:
        """Load settings from ``STREAM_*`` environment variables.

        Empty strings are treated as unset.
        """
        if env is None:
            env = os.environ

        timeout = _get(env, "STREAM_TIMEOUT")
        try:
            resolved_timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ConfigurationError(f"Invalid STREAM_TIMEOUT value: {timeout!r}") from exc

        return cls(
            api_key=_get(env, "STREAM_API_KEY"),
            api_secret=_get(env, "STREAM_API_SECRET"),
            base_url=_get(env, "STREAM_BASE_URL"),
            region=_get(env, "STREAM_REGION"),
            timeout=resolved_timeout,
        )

    def resolve_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError(
                "Missing Stream API key. Pass api_key=... or set STREAM_API_KEY."
            )
        return self.api_key

    def resolve_secret(self) -> str:
        if not self.api_secret:
            raise ConfigurationError(
                "Missing Stream API secret. Pass api_secret=... or set STREAM_API_SECRET."
            )
        return self.api_secret

    def resolve_base_url(self) -> str:
        if self.base_url is not None:
            if not self.base_url:
                raise ConfigurationError("Stream base URL must not be empty.")
            return self.base_url
        if self.region:
            return REGION_API_BASE_URL.format(region=self.region)
        return DEFAULT_API_BASE_URL

    def build_url(self, path: str) -> str:
        return self.resolve_base_url().rstrip("/") + "/" + path.lstrip("/")


def _get(env: Mapping[str, str], key: str) -> str | None:
    value = env.get(key)
    if value == "":
        return None
    return value


__all__ = [
    "StreamConfig",
    "DEFAULT_API_BASE_URL",
    "REGION_API_BASE_URL",
    "DEFAULT_TIMEOUT",
]

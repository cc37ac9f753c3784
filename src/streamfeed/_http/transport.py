"""HTTP transport implementations for sync and async clients."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from ..errors import TransportError

# Filled in from the Request itself; options may not override them
RESERVED_OPTIONS = frozenset({"method", "url", "content", "headers"})


def check_options(options: Mapping[str, Any]) -> None:
    reserved = RESERVED_OPTIONS.intersection(options)
    if reserved:
        raise ValueError(f"Transport options cannot set {sorted(reserved)}")


class BaseTransport:
    """Shared request building for the blocking and async transports.

    Requests go out with the absolute URL and header list they were signed
    with; nothing is added here. ``timeout`` applies to every request whose
    options do not carry their own, including on injected clients. Any
    ``httpx.HTTPError`` is re-raised as ``TransportError`` carrying the
    original exception.
    """

    def __init__(self, timeout: float) -> None:
        self._timeout = timeout

    def _request_kwargs(
        self,
        content: bytes | None,
        headers: Sequence[tuple[str, str]],
        options: Mapping[str, Any] | None,
    ) -> dict[str, Any]:
        options = options or {}
        check_options(options)
        return {
            "timeout": self._timeout,
            **options,
            "content": content,
            "headers": list(headers),
        }


class BlockingTransport(BaseTransport):
    """Synchronous HTTP transport using httpx.Client."""

    def __init__(self, timeout: float, *, client: httpx.Client | None = None) -> None:
        super().__init__(timeout)
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=httpx.Timeout(self._timeout))
        return self._client

    def send(
        self,
        method: str,
        url: str,
        *,
        content: bytes | None = None,
        headers: Sequence[tuple[str, str]] = (),
        options: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        kwargs = self._request_kwargs(content, headers, options)
        try:
            return self._get_client().request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(exc) from exc

    def close(self) -> None:
        if self._client is not None and self._owns_client:
            self._client.close()
            self._client = None


class AsyncTransport(BaseTransport):
    """Asynchronous HTTP transport using httpx.AsyncClient."""

    def __init__(self, timeout: float, *, client: httpx.AsyncClient | None = None) -> None:
        super().__init__(timeout)
        self._client = client
        self._owns_client = client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
        return self._client

    async def send(
        self,
        method: str,
        url: str,
        *,
        content: bytes | None = None,
        headers: Sequence[tuple[str, str]] = (),
        options: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        kwargs = self._request_kwargs(content, headers, options)
        try:
            return await self._get_client().request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(exc) from exc

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


__all__ = [
    "BaseTransport",
    "BlockingTransport",
    "AsyncTransport",
    "RESERVED_OPTIONS",
    "check_options",
]

"""Stream API clients: request preparation, signing and execution."""

from __future__ import annotations

import base64
import dataclasses
import hashlib
import hmac
import logging
import urllib.parse
from email.utils import formatdate
from typing import Any

import httpx

from ._http import AsyncTransport, BlockingTransport
from .config import StreamConfig
from .errors import DecodeError
from .request import KeySecretAuth, Request, TokenAuth
from .token import compact

logger = logging.getLogger(__name__)

SIGNATURE_ALGORITHM = "hmac-sha256"
SIGNED_HEADERS = "date"


def http_signature(key: str, secret: str, date: str) -> str:
    """Build the ``Authorization`` value for key/secret signing."""
    signing_input = f"{SIGNED_HEADERS}: {date}"
    digest = hmac.new(secret.encode("utf-8"), signing_input.encode("utf-8"), hashlib.sha256)
    signature = base64.b64encode(digest.digest()).decode("ascii")
    return (
        f'Signature keyId="{key}",algorithm="{SIGNATURE_ALGORITHM}",'
        f'headers="{SIGNED_HEADERS}",signature="{signature}"'
    )


class _BaseStreamClient:
    """Preparation, signing and response decoding shared by both clients."""

    def __init__(self, config: StreamConfig):
        self._config = config

    @property
    def config(self) -> StreamConfig:
        return self._config

    def prepare_request(self, req: Request) -> Request:
        """Finalize the request URL, adding ``api_key`` to the query."""
        params = {**req.params, "api_key": self._config.resolve_key()}
        query = urllib.parse.urlencode(sorted(params.items()))
        url = f"{self._config.build_url(req.path)}?{query}"
        return dataclasses.replace(req, url=url)

    def sign_request(self, req: Request) -> Request:
        """Prepend authentication headers.

        Requests carrying a token scope get a JWT; all others get an HTTP
        signature over the ``Date`` header.
        """
        auth = req.auth
        headers: tuple[tuple[str, str], ...]
        if isinstance(auth, TokenAuth):
            logger.debug("Signing %s %s with a scoped token", req.method, req.path)
            token = compact(auth.scope, self._config.resolve_secret())
            headers = (("Authorization", token), ("stream-auth-type", "jwt"))
        elif isinstance(auth, KeySecretAuth):
            logger.debug("Signing %s %s with key/secret", req.method, req.path)
            key = self._config.resolve_key()
            secret = self._config.resolve_secret()
            now = formatdate(usegmt=True)
            headers = (
                ("X-Api-Key", key),
                ("Date", now),
                ("Authorization", http_signature(key, secret, now)),
            )
        else:
            raise TypeError(f"Unsupported auth: {auth!r}")
        return dataclasses.replace(req, headers=headers + tuple(req.headers))

    def _decode(self, req: Request, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(
                f"Response from {req.method} {_redact(req.url)} "
                f"is not valid JSON (status {response.status_code})",
                response.content,
            ) from exc


class StreamClient(_BaseStreamClient):
    """Synchronous Stream API client."""

    def __init__(self, config: StreamConfig, *, client: httpx.Client | None = None):
        super().__init__(config)
        self._transport: BlockingTransport = BlockingTransport(config.timeout, client=client)

    def _send(self, req: Request) -> httpx.Response:
        logger.debug("%s %s", req.method, _redact(req.url))
        return self._transport.send(
            req.method, req.url, content=req.body, headers=req.headers, options=req.options
        )

    def execute_request(self, req: Request) -> Any:
        """Send a prepared, signed request and return the decoded JSON body."""
        return self._decode(req, self._send(req))

    def execute_request_no_decode(self, req: Request) -> bytes:
        """Send a prepared, signed request and return the raw body."""
        return self._send(req).content

    def send(self, req: Request, *, decode: bool = True) -> Any:
        """Prepare, sign and execute ``req``."""
        signed = self.sign_request(self.prepare_request(req))
        if decode:
            return self.execute_request(signed)
        return self.execute_request_no_decode(signed)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> StreamClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncStreamClient(_BaseStreamClient):
    """Asynchronous Stream API client."""

    def __init__(self, config: StreamConfig, *, client: httpx.AsyncClient | None = None):
        super().__init__(config)
        self._transport: AsyncTransport = AsyncTransport(config.timeout, client=client)

    async def _send(self, req: Request) -> httpx.Response:
        logger.debug("%s %s", req.method, _redact(req.url))
        return await self._transport.send(
            req.method, req.url, content=req.body, headers=req.headers, options=req.options
        )

    async def execute_request(self, req: Request) -> Any:
        return self._decode(req, await self._send(req))

    async def execute_request_no_decode(self, req: Request) -> bytes:
        return (await self._send(req)).content

    async def send(self, req: Request, *, decode: bool = True) -> Any:
        signed = self.sign_request(self.prepare_request(req))
        if decode:
            return await self.execute_request(signed)
        return await self.execute_request_no_decode(signed)

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> AsyncStreamClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()


def _redact(url: str) -> str:
    return url.split("?", 1)[0]


__all__ = ["StreamClient", "AsyncStreamClient", "http_signature"]

"""Request value objects and builder helpers."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from ._http.transport import check_options
from .token import TokenScope


@dataclass(frozen=True, slots=True)
class KeySecretAuth:
    """Sign with the API key and secret (HTTP signature)."""


@dataclass(frozen=True, slots=True)
class TokenAuth:
    """Sign with a JWT restricted to ``scope``."""

    scope: TokenScope


Auth = KeySecretAuth | TokenAuth


@dataclass(frozen=True)
class Feed:
    slug: str
    user_id: str

    @property
    def id(self) -> str:
        return f"{self.slug}{self.user_id}"


@dataclass(frozen=True)
class Request:
    """A pending API call.

    Never mutated: every helper below returns a new ``Request``.
    """

    method: str = "GET"
    path: str = "/"
    params: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None
    headers: tuple[tuple[str, str], ...] = ()
    url: str = ""
    auth: Auth = field(default_factory=KeySecretAuth)
    options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def token(self) -> TokenScope | None:
        if isinstance(self.auth, TokenAuth):
            return self.auth.scope
        return None


def with_params(request: Request, params: Mapping[str, str]) -> Request:
    """Merge ``params`` into the request params; new values win."""
    return dataclasses.replace(request, params={**request.params, **params})


def with_token(
    request: Request,
    feed_or_resource: Feed | str,
    resource_name: str,
    action_name: str,
) -> Request:
    """Mark ``request`` for JWT signing, scoped to a feed or resource id."""
    if isinstance(feed_or_resource, Feed):
        feed_id = feed_or_resource.id
    else:
        feed_id = feed_or_resource
    scope = TokenScope(resource=resource_name, feed_id=feed_id, action=action_name)
    return dataclasses.replace(request, auth=TokenAuth(scope))


def with_headers(request: Request, headers: Iterable[tuple[str, str]]) -> Request:
    return dataclasses.replace(request, headers=request.headers + tuple(headers))


def with_body(request: Request, body: bytes | Mapping[str, Any] | list[Any] | None) -> Request:
    """Attach a body; mappings and lists are JSON-encoded."""
    if body is not None and not isinstance(body, bytes):
        body = json.dumps(body).encode("utf-8")
        request = with_headers(request, [("content-type", "application/json")])
    return dataclasses.replace(request, body=body)


def with_options(request: Request, **options: Any) -> Request:
    """Merge transport options (``timeout``, ``follow_redirects``, ...).

    ``method``, ``url``, ``content`` and ``headers`` come from the request
    itself and raise ``ValueError`` here.
    """
    check_options(options)
    return dataclasses.replace(request, options={**request.options, **options})


__all__ = [
    "Auth",
    "Feed",
    "KeySecretAuth",
    "Request",
    "TokenAuth",
    "with_body",
    "with_headers",
    "with_options",
    "with_params",
    "with_token",
]

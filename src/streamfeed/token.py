"""Scoped JWT tokens.

A token restricts what a request may do on the server through three claims:
``resource``, ``feed_id`` and ``action``. A claim left unset is written as
``"*"``, which the server reads as "not restricted". The client never matches
claims itself.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

import jwt

from .errors import SignatureVerificationError

ALGORITHM = "HS256"
WILDCARD = "*"

# Registered claims jwt.decode validates; exp is set through expires_in
VALIDATED_CLAIMS = frozenset({"exp", "aud", "iat", "nbf"})


@dataclass(frozen=True)
class TokenScope:
    resource: str = WILDCARD
    feed_id: str = WILDCARD
    action: str = WILDCARD
    user_id: str | None = None
    extra: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("resource", "feed_id", "action"):
            if not isinstance(getattr(self, name), str):
                raise TypeError(f"Token claim {name!r} must be a string")
        if self.user_id is not None and not isinstance(self.user_id, str):
            raise TypeError("Token claim 'user_id' must be a string")
        reserved = VALIDATED_CLAIMS.intersection(self.extra)
        if reserved:
            raise ValueError(f"Token claims {sorted(reserved)} cannot be set on a scope")
        for key, value in self.extra.items():
            if not isinstance(value, str):
                raise TypeError(f"Token claim {key!r} must be a string")

    def to_claims(self) -> dict[str, str]:
        claims = dict(self.extra)
        claims["resource"] = self.resource or WILDCARD
        claims["feed_id"] = self.feed_id or WILDCARD
        claims["action"] = self.action or WILDCARD
        if self.user_id is not None:
            claims["user_id"] = self.user_id
        return claims


def compact(
    scope: TokenScope | Mapping[str, str],
    secret: str,
    *,
    expires_in: float | timedelta | None = None,
) -> str:
    """Sign ``scope`` with ``secret`` and return the compact JWT string.

    Tokens carry no ``exp`` claim unless ``expires_in`` is given.
    """
    if not isinstance(scope, TokenScope):
        scope = _scope_from_mapping(scope)

    payload: dict[str, Any] = dict(scope.to_claims())
    if expires_in is not None:
        seconds = expires_in.total_seconds() if isinstance(expires_in, timedelta) else expires_in
        payload["exp"] = int(time.time() + seconds)

    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def decompact(token: str, secret: str) -> dict[str, Any]:
    """Verify ``token`` against ``secret`` and return its claims."""
    try:
        return jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.InvalidTokenError as e:
        raise SignatureVerificationError("Invalid token", e) from e


def _scope_from_mapping(claims: Mapping[str, str]) -> TokenScope:
    extra = {
        k: v for k, v in claims.items() if k not in ("resource", "feed_id", "action", "user_id")
    }
    return TokenScope(
        resource=claims.get("resource", WILDCARD),
        feed_id=claims.get("feed_id", WILDCARD),
        action=claims.get("action", WILDCARD),
        user_id=claims.get("user_id"),
        extra=extra,
    )


__all__ = ["TokenScope", "compact", "decompact", "ALGORITHM", "WILDCARD"]

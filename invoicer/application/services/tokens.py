# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed session tokens for the admin."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

from invoicer.domain.admins.entities import TokenPayload
from invoicer.domain.admins.repositories import TokenService
from invoicer.shared.errors import TokenExpiredError, TokenInvalidError
from invoicer.shared.logging import logger

ALGORITHM = "HS256"
DEFAULT_TTL = timedelta(days=1)

# Sentinel so callers can pass ``ttl=None`` for a token without ``exp``.
_UNSET: Any = object()


def _timestamp(value: Any) -> datetime | None:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=UTC)
    return None


class JwtTokenService(TokenService):
    def __init__(self, secret: str, *, default_ttl: timedelta | None = DEFAULT_TTL) -> None:
        if not secret:
            raise ValueError("token secret must not be empty")
        self._secret = secret
        self._default_ttl = default_ttl

    def issue(
        self,
        subject_id: int | str,
        username: str,
        ttl: timedelta | None = _UNSET,
    ) -> str:
        lifetime = self._default_ttl if ttl is _UNSET else ttl
        now = datetime.now(UTC)
        claims: dict[str, Any] = {
            "sub": str(subject_id),
            "username": username,
            "iat": int(now.timestamp()),
        }
        if lifetime is not None:
            claims["exp"] = int((now + lifetime).timestamp())
        return jwt.encode(claims, self._secret, algorithm=ALGORITHM)

    def validate(self, token: str) -> TokenPayload:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["sub"]},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.debug("tokens: expired token presented")
            raise TokenExpiredError() from exc
        except jwt.InvalidTokenError as exc:
            logger.debug(f"tokens: rejected token: {exc}")
            raise TokenInvalidError() from exc

        username = claims.get("username")
        if not isinstance(username, str):
            raise TokenInvalidError("token has no username claim")

        return TokenPayload(
            subject_id=str(claims["sub"]),
            username=username,
            issued_at=_timestamp(claims.get("iat")),
            expires_at=_timestamp(claims.get("exp")),
        )

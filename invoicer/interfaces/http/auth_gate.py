# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token gate for protected routes.

The gate answers rejected requests itself with a 401 and a short message;
it never hands the failure to the application error handlers.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import current_app, g, jsonify, request

from invoicer.domain.admins.repositories import TokenService
from invoicer.shared.errors import TokenExpiredError
from invoicer.shared.logging import logger

BEARER_PREFIX = "Bearer "
TOKEN_SERVICE_EXTENSION = "token_service"

MSG_AUTH_REQUIRED = "authentication required"
MSG_TOKEN_MISSING = "token missing"
MSG_TOKEN_EXPIRED = "token expired, please re-authenticate"
MSG_TOKEN_INVALID = "invalid token"


def extract_bearer_token(header: str | None) -> str | None:
    """Return the token part of an ``Authorization`` header.

    ``None`` means the header is absent or not a bearer header; an empty
    string means the scheme is present but the token is not. Only the first
    segment after the scheme counts, so ``"Bearer  abc"`` has no token.
    """
    if not header or not header.startswith(BEARER_PREFIX):
        return None
    return header.split(" ")[1]


def _reject(message: str):
    logger.warning(f"auth_gate: {message} on {request.method} {request.path}")
    return jsonify({"message": message}), 401


def auth_required(view: Callable[..., Any]) -> Callable[..., Any]:
    @wraps(view)
    def inner(*args: Any, **kwargs: Any):
        token = extract_bearer_token(request.headers.get("Authorization"))
        if token is None:
            return _reject(MSG_AUTH_REQUIRED)
        if not token:
            return _reject(MSG_TOKEN_MISSING)

        tokens: TokenService = current_app.extensions[TOKEN_SERVICE_EXTENSION]
        try:
            payload = tokens.validate(token)
        except TokenExpiredError:
            return _reject(MSG_TOKEN_EXPIRED)
        except Exception as exc:
            logger.debug(f"auth_gate: token rejected: {type(exc).__name__}")
            return _reject(MSG_TOKEN_INVALID)

        g.user = payload
        return view(*args, **kwargs)

    return inner


__all__ = ["auth_required", "extract_bearer_token"]

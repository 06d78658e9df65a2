# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from http import HTTPStatus
from typing import Any


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    CAST = "cast"
    CONFLICT = "conflict"
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    SERVER = "server"


@dataclass(slots=True, eq=False)
class AppError(Exception):
    kind: ErrorKind
    message: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    @property
    def status_code(self) -> int:
        return int(self.status)


class ValidationError(AppError):
    def __init__(self, errors: Mapping[str, str]) -> None:
        super().__init__(
            kind=ErrorKind.VALIDATION,
            message="validation error",
            status=HTTPStatus.BAD_REQUEST,
            context={"errors": dict(errors)},
        )

    @property
    def field_errors(self) -> dict[str, str]:
        return dict((self.context or {}).get("errors", {}))


class CastError(AppError):
    def __init__(self, value: object, target: str = "int") -> None:
        super().__init__(
            kind=ErrorKind.CAST,
            message="invalid ID",
            status=HTTPStatus.BAD_REQUEST,
            context={"error": f'Cast to {target} failed for value "{value}"'},
        )


class ConflictError(AppError):
    def __init__(
        self,
        key_pattern: Sequence[str],
        *,
        code: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        if not key_pattern:
            raise ValueError("key_pattern must name at least one field")
        field = key_pattern[0]
        extra: dict[str, Any] = {"field": field, "key_pattern": list(key_pattern)}
        if code:
            extra["error"] = code
        if context:
            extra.update(context)
        super().__init__(
            kind=ErrorKind.CONFLICT,
            message=f"{field} already exists",
            status=HTTPStatus.CONFLICT,
            context=extra,
        )

    @property
    def field(self) -> str:
        return str((self.context or {})["field"])


class TokenInvalidError(AppError):
    def __init__(self, detail: str = "invalid token") -> None:
        super().__init__(
            kind=ErrorKind.TOKEN_INVALID,
            message=detail,
            status=HTTPStatus.UNAUTHORIZED,
        )


class TokenExpiredError(AppError):
    def __init__(self) -> None:
        super().__init__(
            kind=ErrorKind.TOKEN_EXPIRED,
            message="token expired",
            status=HTTPStatus.UNAUTHORIZED,
        )


class UnauthorizedError(AppError):
    def __init__(self, message: str = "unauthorized") -> None:
        super().__init__(
            kind=ErrorKind.UNAUTHORIZED,
            message=message,
            status=HTTPStatus.UNAUTHORIZED,
        )


class NotFoundError(AppError):
    def __init__(self, resource: str) -> None:
        super().__init__(
            kind=ErrorKind.NOT_FOUND,
            message=f"{resource} not found",
            status=HTTPStatus.NOT_FOUND,
        )


class ServerError(AppError):
    def __init__(
        self,
        message: str = "server error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            kind=ErrorKind.SERVER,
            message=message,
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            context=context,
        )

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import traceback
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify
from werkzeug.exceptions import HTTPException

from invoicer.shared.config import load_config
from invoicer.shared.logging import logger

from .base import AppError, ErrorKind

FALLBACK_MESSAGE = "server error"


def _message_of(error: object) -> str | None:
    if isinstance(error, AppError):
        return error.message
    if isinstance(error, HTTPException):
        return error.description
    if isinstance(error, BaseException):
        return str(error) or None
    if error is None or isinstance(error, str):
        return None
    message = getattr(error, "message", None)
    return str(message) if message else None


def _trace_of(error: object) -> str | None:
    if isinstance(error, BaseException) and error.__traceback__ is not None:
        return "".join(traceback.format_exception(error))
    if isinstance(error, BaseException):
        return "".join(traceback.format_exception_only(error))
    return getattr(error, "stack", None)


def _status_of(error: object) -> int:
    if isinstance(error, AppError):
        candidate: Any = error.status_code
    elif isinstance(error, HTTPException):
        candidate = error.code
    else:
        candidate = getattr(error, "status_code", None)
    if isinstance(candidate, int) and not isinstance(candidate, bool) and candidate > 0:
        return candidate
    return int(HTTPStatus.INTERNAL_SERVER_ERROR)


class ErrorTranslator:
    """Maps any raised failure onto a status code and a JSON body.

    Kind-tagged ``AppError`` instances are matched first, in a fixed order
    (validation, cast, conflict, token signature, token expiry). Everything
    else falls through to the default branch, which honours a positive
    ``status_code`` on the failure and only exposes the trace when
    ``include_trace`` is set.
    """

    def __init__(self, *, include_trace: bool = False) -> None:
        self._include_trace = include_trace

    def translate(self, error: object) -> tuple[int, dict[str, Any]]:
        message = _message_of(error)
        trace = _trace_of(error)
        logger.error(f"Error: {message}")
        logger.error(f"Stack: {trace}")

        kind = error.kind if isinstance(error, AppError) else None
        context = dict(error.context or {}) if isinstance(error, AppError) else {}

        if kind is ErrorKind.VALIDATION:
            return 400, {
                "message": "validation error",
                "errors": list(context.get("errors", {}).values()),
            }

        if kind is ErrorKind.CAST:
            return 400, {"message": "invalid ID", "error": context.get("error")}

        if kind is ErrorKind.CONFLICT:
            field = context.pop("field")
            context.pop("key_pattern", None)
            return 409, {"message": f"{field} already exists", "field": field, **context}

        if kind is ErrorKind.TOKEN_INVALID:
            return 401, {"message": "invalid token"}

        if kind is ErrorKind.TOKEN_EXPIRED:
            return 401, {"message": "token expired"}

        body: dict[str, Any] = {**context, "message": message or FALLBACK_MESSAGE}
        if self._include_trace and trace is not None:
            body["stack"] = trace
        return _status_of(error), body


def handle_app_error(translator: ErrorTranslator, error: object) -> tuple[Response, int]:
    status, body = translator.translate(error)
    return jsonify(body), status


def register_error_handler(app: Flask) -> None:
    config = load_config()
    translator = ErrorTranslator(include_trace=config.is_development())
    app.extensions["error_translator"] = translator

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        return handle_app_error(translator, exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return handle_app_error(translator, exc)

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        return handle_app_error(translator, exc)

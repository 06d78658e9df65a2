# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Translation of driver integrity failures into application errors."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError

from invoicer.shared.errors import AppError, ConflictError, ServerError
from invoicer.shared.logging import logger

_UNIQUE_MARKERS = ("unique", "duplicate")


def is_unique_violation(exc: IntegrityError) -> bool:
    detail = str(exc.orig).lower()
    return any(marker in detail for marker in _UNIQUE_MARKERS)


def conflict_from_integrity_error(
    exc: IntegrityError,
    fields: Mapping[str, str],
    *,
    code: str | None = None,
    context: Mapping[str, Any] | None = None,
) -> AppError:
    """Build a ``ConflictError`` naming the wire field behind a unique index.

    ``fields`` maps column names to the field names clients send. Integrity
    failures that are not unique violations, or that name none of the given
    columns, come back as a ``ServerError``.
    """
    detail = str(exc.orig)
    if is_unique_violation(exc):
        for column, wire_name in fields.items():
            if column in detail:
                return ConflictError((wire_name,), code=code, context=context)
    logger.warning(f"db: unmapped integrity error: {detail}")
    return ServerError()

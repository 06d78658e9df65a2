# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, str]:
    """Collapse pydantic errors into a field -> message map, first message wins."""
    field_errors: dict[str, str] = {}

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None) or "body"
        if field_path in field_errors:
            continue
        field_errors[field_path] = f"{field_path}: {error.get('msg', 'invalid value')}"

    return field_errors


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise ValidationError(format_pydantic_errors(exc)) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]

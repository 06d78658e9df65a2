# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from invoicer.infrastructure.db import ENGINE
from invoicer.shared.logging import logger


def database_status(engine: Engine = ENGINE) -> dict[str, object]:
    """Report whether ``engine`` answers a trivial query."""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error(f"health: database check failed: {type(exc).__name__}: {exc}")
        return {"ok": False, "database": "unavailable"}
    return {"ok": True, "database": "ok"}


__all__ = ["database_status"]

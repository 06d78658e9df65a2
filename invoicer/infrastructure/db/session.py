# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase, scoped_session, sessionmaker

from invoicer.shared.config import load_config
from invoicer.shared.logging import logger

_config = load_config()


class Base(DeclarativeBase):
    pass


def _is_memory_url(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


def _engine_kwargs(url: str) -> dict[str, object]:
    kwargs: dict[str, object] = {"echo": False, "pool_pre_ping": True}
    connect_args: dict[str, object] = {}
    if url.startswith("sqlite"):
        connect_args = {
            "check_same_thread": False,
            "timeout": int(_config.database.pool_timeout),
        }
    kwargs["connect_args"] = connect_args
    # in-memory sqlite runs on a single shared connection
    if not _is_memory_url(url):
        kwargs.update(
            pool_size=_config.database.pool_size,
            max_overflow=_config.database.max_overflow,
            pool_timeout=_config.database.pool_timeout,
        )
    return kwargs


ENGINE: Engine = create_engine(_config.database_url, **_engine_kwargs(_config.database_url))


SessionLocal = scoped_session(
    sessionmaker(bind=ENGINE, autoflush=False, autocommit=False, expire_on_commit=False)
)


def init_db() -> None:
    # models must be registered on Base.metadata before create_all
    from . import models  # noqa: F401

    Base.metadata.create_all(bind=ENGINE)
    logger.info("Database schema ensured")


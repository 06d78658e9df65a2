# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from invoicer.domain.admins.entities import Admin as DomainAdmin
from invoicer.domain.admins.exceptions import AdminNotFoundError
from invoicer.domain.admins.repositories import AdminRepository
from invoicer.infrastructure.db.errors import conflict_from_integrity_error
from invoicer.infrastructure.db.models import Admin
from invoicer.infrastructure.unit_of_work import unit_of_work_scope

_UNIQUE_FIELDS = {"username": "username"}


def _to_domain(row: Admin) -> DomainAdmin:
    return DomainAdmin(
        id=row.id,
        username=row.username,
        password_hash=row.password,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlAlchemyAdminRepository(AdminRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainAdmin | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(Admin).filter(Admin.username == username).first()
            return _to_domain(row) if row else None

    def find_by_id(self, admin_id: int) -> DomainAdmin | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Admin, admin_id)
            return _to_domain(row) if row else None

    def add(self, username: str, password: str) -> DomainAdmin:
        with unit_of_work_scope(self._session_factory) as session:
            row = Admin(username=username, password=password)
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                raise conflict_from_integrity_error(exc, _UNIQUE_FIELDS) from exc
            return _to_domain(row)

    def update_credentials(
        self,
        admin_id: int,
        *,
        username: str | None = None,
        password: str | None = None,
    ) -> DomainAdmin:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Admin, admin_id)
            if row is None:
                raise AdminNotFoundError()
            if username:
                row.username = username
            if password:
                # hashed by the before_update hook
                row.password = password
            try:
                session.flush()
            except IntegrityError as exc:
                raise conflict_from_integrity_error(exc, _UNIQUE_FIELDS) from exc
            return _to_domain(row)

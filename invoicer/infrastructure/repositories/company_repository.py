# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from invoicer.domain.invoicing.entities import COMPANY_DEFAULTS
from invoicer.domain.invoicing.entities import Company as DomainCompany
from invoicer.domain.invoicing.repositories import CompanyRepository
from invoicer.infrastructure.db.errors import is_unique_violation
from invoicer.infrastructure.db.models import Company
from invoicer.infrastructure.unit_of_work import unit_of_work_scope
from invoicer.shared.logging import logger

_EDITABLE_FIELDS = frozenset(COMPANY_DEFAULTS)


def company_to_domain(row: Company) -> DomainCompany:
    return DomainCompany(
        id=row.id,
        name=row.name,
        owner=row.owner,
        address=row.address,
        city=row.city,
        postal_code=row.postal_code,
        phone=row.phone,
        email=row.email,
        tax_number=row.tax_number,
        bank_name=row.bank_name,
        account_number=row.account_number,
        iban=row.iban,
        swift=row.swift,
        logo=row.logo,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def acquire_company(session: Session) -> Company:
    """Return the single company row, inserting the defaults on first use.

    Two concurrent first readers race on the unique ``singleton_key``; the
    loser rolls back and reads the winner's row.
    """
    row = session.query(Company).order_by(Company.id.asc()).first()
    if row is not None:
        return row

    row = Company()
    session.add(row)
    try:
        session.flush()
    except IntegrityError as exc:
        if not is_unique_violation(exc):
            raise
        logger.info("company: lost singleton insert race, re-reading")
        session.rollback()
        row = session.query(Company).order_by(Company.id.asc()).one()
    else:
        logger.info("company: created default profile")
    return row


class SqlAlchemyCompanyRepository(CompanyRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def get_or_create(self) -> DomainCompany:
        with unit_of_work_scope(self._session_factory) as session:
            return company_to_domain(acquire_company(session))

    def update(self, changes: Mapping[str, Any]) -> DomainCompany:
        with unit_of_work_scope(self._session_factory) as session:
            row = acquire_company(session)
            for name, value in changes.items():
                if name in _EDITABLE_FIELDS:
                    setattr(row, name, value)
            session.flush()
            return company_to_domain(row)

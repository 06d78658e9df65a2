# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import asdict
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from invoicer.domain.invoicing.entities import (
    Customer,
    InvoiceDraft,
    InvoiceItem,
    PaymentMethod,
    Totals,
)
from invoicer.domain.invoicing.entities import Invoice as DomainInvoice
from invoicer.domain.invoicing.exceptions import DuplicateInvoiceNumberError
from invoicer.domain.invoicing.repositories import InvoiceRepository
from invoicer.infrastructure.db.errors import conflict_from_integrity_error, is_unique_violation
from invoicer.infrastructure.db.models import Invoice
from invoicer.infrastructure.repositories.company_repository import company_to_domain
from invoicer.infrastructure.unit_of_work import unit_of_work_scope

_DOCUMENT_FIELDS = ("customer", "items", "totals")
_SCALAR_FIELDS = ("invoice_number", "date", "delivery_date", "payment_method", "currency")


def _dump(name: str, value: Any) -> Any:
    if name == "items":
        return [asdict(item) for item in value]
    if name in ("customer", "totals"):
        return asdict(value)
    if name == "payment_method":
        return PaymentMethod(value).value
    return value


def _to_domain(row: Invoice) -> DomainInvoice:
    customer = row.customer or {}
    totals = row.totals or {}
    return DomainInvoice(
        id=row.id,
        invoice_number=row.invoice_number,
        date=row.date,
        delivery_date=row.delivery_date,
        company=company_to_domain(row.company),
        customer=Customer(
            name=customer.get("name", ""),
            address=customer.get("address", ""),
            city=customer.get("city", ""),
            postal_code=customer.get("postal_code", ""),
            custom_field1=customer.get("custom_field1"),
            custom_field2=customer.get("custom_field2"),
        ),
        items=tuple(InvoiceItem(**item) for item in row.items or ()),
        payment_method=PaymentMethod(row.payment_method),
        currency=row.currency,
        totals=Totals(**totals),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _duplicate_number(exc: IntegrityError, invoice_number: str | None) -> Exception:
    if is_unique_violation(exc) and "invoice_number" in str(exc.orig):
        return DuplicateInvoiceNumberError(invoice_number)
    return conflict_from_integrity_error(exc, {})


class SqlAlchemyInvoiceRepository(InvoiceRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[DomainInvoice]:
        with unit_of_work_scope(self._session_factory) as session:
            rows = (
                session.query(Invoice)
                .order_by(Invoice.created_at.desc(), Invoice.id.desc())
                .all()
            )
            return [_to_domain(row) for row in rows]

    def get(self, invoice_id: int) -> DomainInvoice | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Invoice, invoice_id)
            return _to_domain(row) if row else None

    def add(self, draft: InvoiceDraft, company_id: int) -> DomainInvoice:
        with unit_of_work_scope(self._session_factory) as session:
            row = Invoice(
                company_id=company_id,
                **{
                    name: _dump(name, getattr(draft, name))
                    for name in _SCALAR_FIELDS + _DOCUMENT_FIELDS
                },
            )
            session.add(row)
            try:
                session.flush()
            except IntegrityError as exc:
                raise _duplicate_number(exc, draft.invoice_number) from exc
            return _to_domain(row)

    def update(self, invoice_id: int, changes: Mapping[str, Any]) -> DomainInvoice | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Invoice, invoice_id)
            if row is None:
                return None
            for name, value in changes.items():
                if name in _SCALAR_FIELDS or name in _DOCUMENT_FIELDS:
                    setattr(row, name, _dump(name, value))
            try:
                session.flush()
            except IntegrityError as exc:
                raise _duplicate_number(exc, changes.get("invoice_number")) from exc
            return _to_domain(row)

    def delete(self, invoice_id: int) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(Invoice, invoice_id)
            if row is None:
                return False
            session.delete(row)
            return True

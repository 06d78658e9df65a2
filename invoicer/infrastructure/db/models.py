# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from datetime import UTC, datetime
from functools import lru_cache
from typing import Any

from sqlalchemy import JSON, ForeignKey, Integer, String, Text, event, inspect
from sqlalchemy.orm import Mapped, mapped_column, relationship

from invoicer.application.services.password_hashing import BcryptPasswordHasher
from invoicer.domain.invoicing.entities import (
    COMPANY_DEFAULTS,
    COMPANY_FIELD_LENGTHS,
    CURRENCY_LENGTH,
    DEFAULT_CURRENCY,
    INVOICE_DATE_LENGTH,
    INVOICE_NUMBER_LENGTH,
    PaymentMethod,
)
from invoicer.infrastructure.db.session import Base
from invoicer.infrastructure.db.types import UtcDateTime
from invoicer.shared.config import load_config

COMPANY_SINGLETON_KEY = "company"


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _company_column(field_name: str) -> Mapped[str]:
    return mapped_column(
        String(COMPANY_FIELD_LENGTHS[field_name]), default=COMPANY_DEFAULTS[field_name]
    )


class Admin(Base):
    __tablename__ = "admins"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    # Plaintext on assignment, replaced by its bcrypt hash during flush.
    password: Mapped[str] = mapped_column("password_hash", String(128))
    created_at: Mapped[datetime] = mapped_column(UtcDateTime, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        UtcDateTime, default=_utcnow, onupdate=_utcnow
    )


class Company(Base):
    __tablename__ = "companies"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    singleton_key: Mapped[str] = mapped_column(
        String(16), unique=True, default=COMPANY_SINGLETON_KEY
    )
    name: Mapped[str] = _company_column("name")
    owner: Mapped[str] = _company_column("owner")
    address: Mapped[str] = _company_column("address")
    city: Mapped[str] = _company_column("city")
    postal_code: Mapped[str] = _company_column("postal_code")
    phone: Mapped[str] = _company_column("phone")
    email: Mapped[str] = _company_column("email")
    tax_number: Mapped[str] = _company_column("tax_number")
    bank_name: Mapped[str] = _company_column("bank_name")
    account_number: Mapped[str] = _company_column("account_number")
    iban: Mapped[str] = _company_column("iban")
    swift: Mapped[str] = _company_column("swift")
    # base64 data URL or plain URL
    logo: Mapped[str] = mapped_column(Text, default=COMPANY_DEFAULTS["logo"])
    created_at: Mapped[datetime] = mapped_column(UtcDateTime, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        UtcDateTime, default=_utcnow, onupdate=_utcnow
    )


class Invoice(Base):
    __tablename__ = "invoices"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    invoice_number: Mapped[str] = mapped_column(
        String(INVOICE_NUMBER_LENGTH), unique=True, index=True
    )
    date: Mapped[str] = mapped_column(String(INVOICE_DATE_LENGTH))
    delivery_date: Mapped[str | None] = mapped_column(
        String(INVOICE_DATE_LENGTH), nullable=True
    )
    company_id: Mapped[int] = mapped_column(
        ForeignKey("companies.id", ondelete="RESTRICT"), index=True
    )
    company: Mapped[Company] = relationship(Company, lazy="joined")
    customer: Mapped[dict[str, Any]] = mapped_column(JSON)
    items: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
    payment_method: Mapped[str] = mapped_column(String(16), default=PaymentMethod.CARD.value)
    currency: Mapped[str] = mapped_column(
        String(CURRENCY_LENGTH), default=DEFAULT_CURRENCY
    )
    totals: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        UtcDateTime, default=_utcnow, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        UtcDateTime, default=_utcnow, onupdate=_utcnow
    )


@lru_cache(maxsize=1)
def _password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=load_config().bcrypt_rounds)


@event.listens_for(Admin, "before_insert")
def _hash_password_on_insert(mapper, connection, target: Admin) -> None:
    target.password = _password_hasher().hash(target.password)


@event.listens_for(Admin, "before_update")
def _hash_password_on_change(mapper, connection, target: Admin) -> None:
    if inspect(target).attrs.password.history.has_changes():
        target.password = _password_hasher().hash(target.password)

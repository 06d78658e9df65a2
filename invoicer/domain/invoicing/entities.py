# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Company profile and invoice documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType

COMPANY_DEFAULTS = MappingProxyType(
    {
        "name": "Your Company Name",
        "owner": "",
        "address": "123 Business Street",
        "city": "Berlin",
        "postal_code": "10115",
        "phone": "+49 30 12345678",
        "email": "info@yourcompany.com",
        "tax_number": "DE123456789",
        "bank_name": "Deutsche Bank",
        "account_number": "1234567890",
        "iban": "DE89370400440532013000",
        "swift": "DEUTDEFF",
        "logo": "",
    }
)

# column widths shared by the schema and request validation
COMPANY_FIELD_LENGTHS = MappingProxyType(
    {
        "name": 256,
        "owner": 256,
        "address": 256,
        "city": 128,
        "postal_code": 32,
        "phone": 64,
        "email": 256,
        "tax_number": 64,
        "bank_name": 128,
        "account_number": 64,
        "iban": 64,
        "swift": 32,
    }
)
INVOICE_NUMBER_LENGTH = 128
INVOICE_DATE_LENGTH = 64
CURRENCY_LENGTH = 8

DEFAULT_CURRENCY = "EUR"
DEFAULT_ITEM_TAX = 19.0


class PaymentMethod(StrEnum):
    CARD = "card"
    CASH = "cash"


@dataclass(slots=True, frozen=True)
class Company:
    """The single business profile every invoice is issued by."""

    id: int
    name: str
    owner: str
    address: str
    city: str
    postal_code: str
    phone: str
    email: str
    tax_number: str
    bank_name: str
    account_number: str
    iban: str
    swift: str
    logo: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class Customer:
    name: str
    address: str
    city: str
    postal_code: str
    custom_field1: str | None = None
    custom_field2: str | None = None


@dataclass(slots=True, frozen=True)
class InvoiceItem:
    name: str
    quantity: float = 1
    price: float = 0
    tax: float = DEFAULT_ITEM_TAX


@dataclass(slots=True, frozen=True)
class Totals:
    subtotal: float = 0
    total_tax: float = 0
    total: float = 0


@dataclass(slots=True, frozen=True)
class InvoiceDraft:
    """Invoice fields as supplied by a client, before storage assigns identity."""

    invoice_number: str
    date: str
    customer: Customer
    delivery_date: str | None = None
    items: tuple[InvoiceItem, ...] = ()
    payment_method: PaymentMethod = PaymentMethod.CARD
    currency: str = DEFAULT_CURRENCY
    totals: Totals = field(default_factory=Totals)


@dataclass(slots=True, frozen=True)
class Invoice:
    id: int
    invoice_number: str
    date: str
    delivery_date: str | None
    company: Company
    customer: Customer
    items: tuple[InvoiceItem, ...]
    payment_method: PaymentMethod
    currency: str
    totals: Totals
    created_at: datetime
    updated_at: datetime

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Any

from pydantic import Field

from invoicer.domain.invoicing.entities import (
    CURRENCY_LENGTH,
    DEFAULT_CURRENCY,
    DEFAULT_ITEM_TAX,
    INVOICE_DATE_LENGTH,
    INVOICE_NUMBER_LENGTH,
    Customer,
    Invoice,
    InvoiceDraft,
    InvoiceItem,
    PaymentMethod,
    Totals,
)
from invoicer.interfaces.http.dto.base import CamelModel, NonEmptyStr, bounded_str
from invoicer.interfaces.http.dto.company import CompanyDTO

_IDENTIFIER_KEYS = frozenset({"_id", "id"})
_NESTED_DOCUMENTS = ("customer", "items", "totals")

_InvoiceNumber = bounded_str(INVOICE_NUMBER_LENGTH)
_Date = bounded_str(INVOICE_DATE_LENGTH)
_DeliveryDate = bounded_str(INVOICE_DATE_LENGTH, min_length=0)
_Currency = bounded_str(CURRENCY_LENGTH)


def strip_identifiers(value: Any) -> Any:
    """Drop ``_id``/``id`` keys at every depth of a JSON value."""
    if isinstance(value, list):
        return [strip_identifiers(item) for item in value]
    if isinstance(value, dict):
        return {
            key: strip_identifiers(item)
            for key, item in value.items()
            if key not in _IDENTIFIER_KEYS
        }
    return value


def clean_invoice_payload(payload: dict[str, Any]) -> dict[str, Any]:
    cleaned = dict(payload)
    for key in _NESTED_DOCUMENTS:
        if key in cleaned:
            cleaned[key] = strip_identifiers(cleaned[key])
    return cleaned


class CustomerDTO(CamelModel):
    name: NonEmptyStr
    address: NonEmptyStr
    city: NonEmptyStr
    postal_code: NonEmptyStr
    custom_field1: str | None = None
    custom_field2: str | None = None

    def to_domain(self) -> Customer:
        return Customer(**self.model_dump())


class InvoiceItemDTO(CamelModel):
    name: NonEmptyStr
    quantity: float = 1
    price: float = 0
    tax: float = DEFAULT_ITEM_TAX

    def to_domain(self) -> InvoiceItem:
        return InvoiceItem(**self.model_dump())


class TotalsDTO(CamelModel):
    subtotal: float = 0
    total_tax: float = 0
    total: float = 0

    def to_domain(self) -> Totals:
        return Totals(**self.model_dump())


class InvoiceCreateDTO(CamelModel):
    invoice_number: _InvoiceNumber
    date: _Date
    delivery_date: _DeliveryDate | None = None
    customer: CustomerDTO
    items: list[InvoiceItemDTO] = Field(default_factory=list)
    payment_method: PaymentMethod = PaymentMethod.CARD
    currency: _Currency = DEFAULT_CURRENCY
    totals: TotalsDTO = Field(default_factory=TotalsDTO)

    def to_draft(self) -> InvoiceDraft:
        return InvoiceDraft(
            invoice_number=self.invoice_number,
            date=self.date,
            delivery_date=self.delivery_date,
            customer=self.customer.to_domain(),
            items=tuple(item.to_domain() for item in self.items),
            payment_method=self.payment_method,
            currency=self.currency,
            totals=self.totals.to_domain(),
        )


class InvoiceUpdateDTO(CamelModel):
    """Partial invoice update; every key that is sent replaces the stored value.

    ``deliveryDate: null`` clears the delivery date. ``null`` for any other
    field is treated like an absent key.
    """

    invoice_number: _InvoiceNumber | None = None
    date: _Date | None = None
    delivery_date: _DeliveryDate | None = None
    customer: CustomerDTO | None = None
    items: list[InvoiceItemDTO] | None = None
    payment_method: PaymentMethod | None = None
    currency: _Currency | None = None
    totals: TotalsDTO | None = None

    def to_changes(self) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        for name in self.model_fields_set:
            value = getattr(self, name)
            if value is None and name != "delivery_date":
                continue
            if isinstance(value, CustomerDTO | TotalsDTO):
                value = value.to_domain()
            elif name == "items":
                value = tuple(item.to_domain() for item in value)
            changes[name] = value
        return changes


class InvoiceDTO(CamelModel):
    id: int
    invoice_number: str
    date: str
    delivery_date: str | None
    company: CompanyDTO
    customer: CustomerDTO
    items: list[InvoiceItemDTO]
    payment_method: PaymentMethod
    currency: str
    totals: TotalsDTO
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, invoice: Invoice) -> InvoiceDTO:
        return cls.model_validate(asdict(invoice))

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

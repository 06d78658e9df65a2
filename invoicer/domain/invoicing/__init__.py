# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import (
    COMPANY_DEFAULTS,
    Company,
    Customer,
    Invoice,
    InvoiceDraft,
    InvoiceItem,
    PaymentMethod,
    Totals,
)
from .exceptions import DuplicateInvoiceNumberError, InvoiceNotFoundError

__all__ = [
    "COMPANY_DEFAULTS",
    "Company",
    "Customer",
    "DuplicateInvoiceNumberError",
    "Invoice",
    "InvoiceDraft",
    "InvoiceItem",
    "InvoiceNotFoundError",
    "PaymentMethod",
    "Totals",
]

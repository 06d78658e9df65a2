# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicer.shared.errors.base import ConflictError, NotFoundError


class InvoiceNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("invoice")


class DuplicateInvoiceNumberError(ConflictError):
    CODE = "DUPLICATE_INVOICE_NUMBER"

    def __init__(self, invoice_number: str | None) -> None:
        super().__init__(
            ("invoiceNumber",),
            code=self.CODE,
            context={"invoiceNumber": invoice_number},
        )

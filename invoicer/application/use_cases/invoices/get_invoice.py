# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicer.application.identifiers import parse_identifier
from invoicer.domain.invoicing.entities import Invoice
from invoicer.domain.invoicing.exceptions import InvoiceNotFoundError
from invoicer.domain.invoicing.repositories import InvoiceRepository


class GetInvoiceUseCase:
    def __init__(self, *, invoices: InvoiceRepository) -> None:
        self._invoices = invoices

    def execute(self, raw_id: object) -> Invoice:
        invoice = self._invoices.get(parse_identifier(raw_id))
        if invoice is None:
            raise InvoiceNotFoundError()
        return invoice

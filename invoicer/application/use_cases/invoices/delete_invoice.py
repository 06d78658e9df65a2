# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicer.application.identifiers import parse_identifier
from invoicer.domain.invoicing.exceptions import InvoiceNotFoundError
from invoicer.domain.invoicing.repositories import InvoiceRepository
from invoicer.shared.logging import logger


class DeleteInvoiceUseCase:
    def __init__(self, *, invoices: InvoiceRepository) -> None:
        self._invoices = invoices

    def execute(self, raw_id: object) -> None:
        invoice_id = parse_identifier(raw_id)
        if not self._invoices.delete(invoice_id):
            raise InvoiceNotFoundError()
        logger.info(f"invoice.delete: id={invoice_id}")

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from invoicer.application.identifiers import parse_identifier
from invoicer.domain.invoicing.entities import Invoice
from invoicer.domain.invoicing.exceptions import InvoiceNotFoundError
from invoicer.domain.invoicing.repositories import InvoiceRepository
from invoicer.shared.logging import logger


class UpdateInvoiceUseCase:
    def __init__(self, *, invoices: InvoiceRepository) -> None:
        self._invoices = invoices

    def execute(self, raw_id: object, changes: Mapping[str, Any]) -> Invoice:
        invoice_id = parse_identifier(raw_id)
        invoice = self._invoices.update(invoice_id, changes)
        if invoice is None:
            raise InvoiceNotFoundError()
        logger.info(f"invoice.update: id={invoice_id} fields={sorted(changes)}")
        return invoice

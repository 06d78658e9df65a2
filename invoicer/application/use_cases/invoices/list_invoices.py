# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from invoicer.domain.invoicing.entities import Invoice
from invoicer.domain.invoicing.repositories import InvoiceRepository


class ListInvoicesUseCase:
    def __init__(self, *, invoices: InvoiceRepository) -> None:
        self._invoices = invoices

    def execute(self) -> Sequence[Invoice]:
        return self._invoices.list_all()

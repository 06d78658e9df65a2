# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicer.domain.invoicing.entities import Invoice, InvoiceDraft
from invoicer.domain.invoicing.repositories import CompanyRepository, InvoiceRepository
from invoicer.shared.logging import logger


class CreateInvoiceUseCase:
    """Stores a new invoice issued by the company profile.

    The company is created with its defaults when none exists yet. A reused
    invoice number surfaces as ``DuplicateInvoiceNumberError`` from the
    repository.
    """

    def __init__(self, *, invoices: InvoiceRepository, companies: CompanyRepository) -> None:
        self._invoices = invoices
        self._companies = companies

    def execute(self, draft: InvoiceDraft) -> Invoice:
        company = self._companies.get_or_create()
        invoice = self._invoices.add(draft, company.id)
        logger.info(f"invoice.create: id={invoice.id} number={invoice.invoice_number}")
        return invoice

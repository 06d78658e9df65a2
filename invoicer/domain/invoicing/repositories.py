# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .entities import Company, Invoice, InvoiceDraft


class CompanyRepository(Protocol):
    def get_or_create(self) -> Company: ...
    def update(self, changes: Mapping[str, Any]) -> Company: ...


class InvoiceRepository(Protocol):
    def list_all(self) -> Sequence[Invoice]: ...
    def get(self, invoice_id: int) -> Invoice | None: ...
    def add(self, draft: InvoiceDraft, company_id: int) -> Invoice: ...
    def update(self, invoice_id: int, changes: Mapping[str, Any]) -> Invoice | None: ...
    def delete(self, invoice_id: int) -> bool: ...

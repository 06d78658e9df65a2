# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicer.domain.invoicing.entities import Company
from invoicer.domain.invoicing.repositories import CompanyRepository


class GetCompanyUseCase:
    def __init__(self, *, companies: CompanyRepository) -> None:
        self._companies = companies

    def execute(self) -> Company:
        return self._companies.get_or_create()

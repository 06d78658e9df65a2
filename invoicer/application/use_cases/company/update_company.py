# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from invoicer.domain.invoicing.entities import Company
from invoicer.domain.invoicing.repositories import CompanyRepository
from invoicer.shared.logging import logger


class UpdateCompanyUseCase:
    def __init__(self, *, companies: CompanyRepository) -> None:
        self._companies = companies

    def execute(self, changes: Mapping[str, Any]) -> Company:
        company = self._companies.update(changes)
        logger.info(f"company.update: fields={sorted(changes)}")
        return company

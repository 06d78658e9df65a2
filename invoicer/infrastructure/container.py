# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from invoicer.application.services.password_hashing import BcryptPasswordHasher
from invoicer.application.services.tokens import JwtTokenService
from invoicer.application.use_cases.admin.change_credentials import ChangeCredentialsUseCase
from invoicer.application.use_cases.admin.login_admin import LoginAdminUseCase
from invoicer.application.use_cases.company.get_company import GetCompanyUseCase
from invoicer.application.use_cases.company.update_company import UpdateCompanyUseCase
from invoicer.application.use_cases.invoices.create_invoice import CreateInvoiceUseCase
from invoicer.application.use_cases.invoices.delete_invoice import DeleteInvoiceUseCase
from invoicer.application.use_cases.invoices.get_invoice import GetInvoiceUseCase
from invoicer.application.use_cases.invoices.list_invoices import ListInvoicesUseCase
from invoicer.application.use_cases.invoices.update_invoice import UpdateInvoiceUseCase
from invoicer.infrastructure.db import SessionLocal
from invoicer.infrastructure.repositories.admin_repository import SqlAlchemyAdminRepository
from invoicer.infrastructure.repositories.company_repository import SqlAlchemyCompanyRepository
from invoicer.infrastructure.repositories.invoice_repository import SqlAlchemyInvoiceRepository
from invoicer.interfaces.http.controllers.admin_controller import AdminController
from invoicer.interfaces.http.controllers.company_controller import CompanyController
from invoicer.interfaces.http.controllers.invoices_controller import InvoicesController
from invoicer.shared.config import load_config


class Container:
    def __init__(self) -> None:
        self._config = load_config()

    # Services

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self._config.bcrypt_rounds)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            self._config.jwt_secret,
            default_ttl=timedelta(seconds=self._config.token_ttl_seconds),
        )

    # Repositories

    @cached_property
    def admin_repository(self) -> SqlAlchemyAdminRepository:
        return SqlAlchemyAdminRepository(SessionLocal)

    @cached_property
    def company_repository(self) -> SqlAlchemyCompanyRepository:
        return SqlAlchemyCompanyRepository(SessionLocal)

    @cached_property
    def invoice_repository(self) -> SqlAlchemyInvoiceRepository:
        return SqlAlchemyInvoiceRepository(SessionLocal)

    # Controllers

    @cached_property
    def admin_controller(self) -> AdminController:
        return AdminController(
            login_use_case=LoginAdminUseCase(
                admins=self.admin_repository,
                password_hasher=self.password_hasher,
                tokens=self.token_service,
            ),
            change_credentials_use_case=ChangeCredentialsUseCase(
                admins=self.admin_repository,
                password_hasher=self.password_hasher,
                tokens=self.token_service,
            ),
        )

    @cached_property
    def company_controller(self) -> CompanyController:
        return CompanyController(
            get_use_case=GetCompanyUseCase(companies=self.company_repository),
            update_use_case=UpdateCompanyUseCase(companies=self.company_repository),
        )

    @cached_property
    def invoices_controller(self) -> InvoicesController:
        invoices = self.invoice_repository
        return InvoicesController(
            list_use_case=ListInvoicesUseCase(invoices=invoices),
            get_use_case=GetInvoiceUseCase(invoices=invoices),
            create_use_case=CreateInvoiceUseCase(
                invoices=invoices, companies=self.company_repository
            ),
            update_use_case=UpdateInvoiceUseCase(invoices=invoices),
            delete_use_case=DeleteInvoiceUseCase(invoices=invoices),
        )


container = Container()

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicer.application.identifiers import parse_identifier
from invoicer.domain.admins.exceptions import AdminNotFoundError, OldPasswordIncorrectError
from invoicer.domain.admins.repositories import AdminRepository, PasswordHasher, TokenService
from invoicer.shared.errors import CastError
from invoicer.shared.logging import logger

from .login_admin import AdminSession


class ChangeCredentialsUseCase:
    def __init__(
        self,
        *,
        admins: AdminRepository,
        password_hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._admins = admins
        self._password_hasher = password_hasher
        self._tokens = tokens

    def execute(
        self,
        subject_id: str,
        old_password: str,
        new_username: str | None = None,
        new_password: str | None = None,
    ) -> AdminSession:
        try:
            admin_id = parse_identifier(subject_id)
        except CastError:
            raise AdminNotFoundError() from None
        admin = self._admins.find_by_id(admin_id)
        if admin is None:
            raise AdminNotFoundError()

        if not self._password_hasher.verify(old_password, admin.password_hash):
            raise OldPasswordIncorrectError()

        if new_username or new_password:
            admin = self._admins.update_credentials(
                admin.id,
                username=new_username or None,
                password=new_password or None,
            )
            logger.info(
                f"admin.credentials: updated admin_id={admin.id} "
                f"username_changed={bool(new_username)} password_changed={bool(new_password)}"
            )

        # the username claim may have changed
        token = self._tokens.issue(admin.id, admin.username)
        return AdminSession(token=token, username=admin.username)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from invoicer.domain.admins.exceptions import InvalidCredentialsError
from invoicer.domain.admins.repositories import AdminRepository, PasswordHasher, TokenService
from invoicer.shared.logging import logger


@dataclass(slots=True, frozen=True)
class AdminSession:
    token: str
    username: str


class LoginAdminUseCase:
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

    def execute(self, username: str, password: str) -> AdminSession:
        admin = self._admins.find_by_username(username)
        # unknown user and wrong password are indistinguishable to the caller
        if admin is None or not self._password_hasher.verify(password, admin.password_hash):
            logger.info(f"admin.login: rejected username={username}")
            raise InvalidCredentialsError()

        token = self._tokens.issue(admin.id, admin.username)
        return AdminSession(token=token, username=admin.username)

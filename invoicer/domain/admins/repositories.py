# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from typing import Protocol

from .entities import Admin, TokenPayload


class AdminRepository(Protocol):
    def find_by_username(self, username: str) -> Admin | None: ...
    def find_by_id(self, admin_id: int) -> Admin | None: ...
    def add(self, username: str, password: str) -> Admin: ...
    def update_credentials(
        self, admin_id: int, *, username: str | None = None, password: str | None = None
    ) -> Admin: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, subject_id: int | str, username: str, ttl: timedelta | None = ...) -> str: ...
    def validate(self, token: str) -> TokenPayload: ...

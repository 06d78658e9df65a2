# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from invoicer.shared.errors.base import NotFoundError, UnauthorizedError


class InvalidCredentialsError(UnauthorizedError):
    def __init__(self) -> None:
        super().__init__("invalid username or password")


class OldPasswordIncorrectError(UnauthorizedError):
    def __init__(self) -> None:
        super().__init__("old password incorrect")


class AdminNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("admin")

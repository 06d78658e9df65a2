# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Admin, TokenPayload
from .exceptions import AdminNotFoundError, InvalidCredentialsError, OldPasswordIncorrectError

__all__ = [
    "Admin",
    "AdminNotFoundError",
    "InvalidCredentialsError",
    "OldPasswordIncorrectError",
    "TokenPayload",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .password_hashing import BcryptPasswordHasher
from .tokens import DEFAULT_TTL, JwtTokenService

__all__ = ["BcryptPasswordHasher", "DEFAULT_TTL", "JwtTokenService"]

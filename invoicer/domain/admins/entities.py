# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Admin:

    id: int
    username: str
    password_hash: str
    created_at: datetime
    updated_at: datetime


@dataclass(slots=True, frozen=True)
class TokenPayload:
    """Decoded claims of a session token."""

    subject_id: str
    username: str
    issued_at: datetime | None
    expires_at: datetime | None

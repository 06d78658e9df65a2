"""Password hashing strategies."""

from __future__ import annotations

import bcrypt

from invoicer.domain.admins.repositories import PasswordHasher

DEFAULT_ROUNDS = 12


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt with a fresh salt per hash.

    ``verify`` returns ``False`` on a mismatch and only raises ``ValueError``
    when the stored value is not a bcrypt hash at all.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        return bool(bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8")))

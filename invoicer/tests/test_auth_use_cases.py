from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest

from invoicer.application.use_cases.admin.change_credentials import ChangeCredentialsUseCase
from invoicer.application.use_cases.admin.login_admin import LoginAdminUseCase
from invoicer.domain.admins.entities import Admin, TokenPayload
from invoicer.domain.admins.exceptions import (
    AdminNotFoundError,
    InvalidCredentialsError,
    OldPasswordIncorrectError,
)
from invoicer.domain.admins.repositories import AdminRepository, PasswordHasher, TokenService


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class InMemoryAdminRepository(AdminRepository):
    def __init__(self, hasher: PasswordHasher) -> None:
        self._hasher = hasher
        self._admins: dict[int, Admin] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> Admin | None:
        return next((a for a in self._admins.values() if a.username == username), None)

    def find_by_id(self, admin_id: int) -> Admin | None:
        return self._admins.get(admin_id)

    def add(self, username: str, password: str) -> Admin:
        now = datetime.now(UTC)
        admin = Admin(
            id=self._seq,
            username=username,
            password_hash=self._hasher.hash(password),
            created_at=now,
            updated_at=now,
        )
        self._seq += 1
        self._admins[admin.id] = admin
        return admin

    def update_credentials(
        self, admin_id: int, *, username: str | None = None, password: str | None = None
    ) -> Admin:
        admin = self._admins[admin_id]
        if username:
            admin = replace(admin, username=username)
        if password:
            admin = replace(admin, password_hash=self._hasher.hash(password))
        self._admins[admin_id] = admin
        return admin


class RecordingTokenService(TokenService):
    def __init__(self) -> None:
        self.issued: list[tuple[str, str]] = []

    def issue(self, subject_id, username, ttl=None) -> str:
        self.issued.append((str(subject_id), username))
        return f"token-{subject_id}-{username}-{len(self.issued)}"

    def validate(self, token: str) -> TokenPayload:
        now = datetime.now(UTC)
        _, subject_id, username, _ = token.split("-")
        return TokenPayload(subject_id, username, now, now + timedelta(days=1))


@pytest.fixture
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture
def admins(hasher) -> InMemoryAdminRepository:
    repo = InMemoryAdminRepository(hasher)
    repo.add("admin", "old-pass")
    return repo


@pytest.fixture
def tokens() -> RecordingTokenService:
    return RecordingTokenService()


@pytest.fixture
def login(admins, hasher, tokens) -> LoginAdminUseCase:
    return LoginAdminUseCase(admins=admins, password_hasher=hasher, tokens=tokens)


@pytest.fixture
def change(admins, hasher, tokens) -> ChangeCredentialsUseCase:
    return ChangeCredentialsUseCase(admins=admins, password_hasher=hasher, tokens=tokens)


def test_login_returns_token_and_username(login, tokens) -> None:
    session = login.execute("admin", "old-pass")

    assert session.username == "admin"
    assert session.token == "token-1-admin-1"
    assert tokens.issued == [("1", "admin")]


@pytest.mark.parametrize(("username", "password"), [("ghost", "old-pass"), ("admin", "wrong")])
def test_login_rejects_unknown_user_and_wrong_password_alike(login, tokens, username, password) -> None:
    with pytest.raises(InvalidCredentialsError) as exc_info:
        login.execute(username, password)

    assert exc_info.value.message == "invalid username or password"
    assert exc_info.value.status_code == 401
    assert tokens.issued == []


def test_change_credentials_requires_existing_admin(change) -> None:
    for subject in ("99", "not-a-number", "99999999999999999999999"):
        with pytest.raises(AdminNotFoundError) as exc_info:
            change.execute(subject, "old-pass", new_username="x")
        assert exc_info.value.message == "admin not found"


def test_change_credentials_checks_old_password(change, admins) -> None:
    with pytest.raises(OldPasswordIncorrectError) as exc_info:
        change.execute("1", "wrong", new_password="new-pass")

    assert exc_info.value.message == "old password incorrect"
    assert admins.find_by_id(1).password_hash == "hashed:old-pass"


def test_change_username_and_password(change, login, admins) -> None:
    session = change.execute("1", "old-pass", new_username="boss", new_password="new-pass")

    assert session.username == "boss"
    assert admins.find_by_username("admin") is None
    assert admins.find_by_id(1).password_hash == "hashed:new-pass"
    with pytest.raises(InvalidCredentialsError):
        login.execute("boss", "old-pass")
    assert login.execute("boss", "new-pass").username == "boss"


def test_change_only_password_keeps_username(change, admins) -> None:
    session = change.execute("1", "old-pass", new_password="new-pass")

    assert session.username == "admin"
    assert admins.find_by_id(1).password_hash == "hashed:new-pass"


def test_change_with_nothing_new_is_a_successful_noop(change, admins, tokens) -> None:
    before = admins.find_by_id(1)

    session = change.execute("1", "old-pass", new_username="", new_password=None)

    assert admins.find_by_id(1) == before
    assert session.username == "admin"
    assert tokens.issued == [("1", "admin")]

from __future__ import annotations

import pytest

from invoicer.application.services.password_hashing import BcryptPasswordHasher
from invoicer.infrastructure.admin_setup import setup_admin_user
from invoicer.infrastructure.container import container
from invoicer.infrastructure.db import SessionLocal
from invoicer.infrastructure.repositories.admin_repository import SqlAlchemyAdminRepository
from invoicer.shared.config import load_config
from invoicer.shared.errors import ConflictError

hasher = BcryptPasswordHasher(rounds=4)


def test_password_is_hashed_on_insert(app) -> None:
    admin = container.admin_repository.add("admin", "plain secret")

    assert admin.password_hash != "plain secret"
    assert admin.password_hash.startswith("$2b$04$")
    assert hasher.verify("plain secret", admin.password_hash)


def test_username_change_leaves_hash_untouched(app) -> None:
    admin = container.admin_repository.add("admin", "plain secret")

    renamed = container.admin_repository.update_credentials(admin.id, username="boss")

    assert renamed.username == "boss"
    assert renamed.password_hash == admin.password_hash


def test_password_change_rehashes(app) -> None:
    admin = container.admin_repository.add("admin", "plain secret")

    updated = container.admin_repository.update_credentials(admin.id, password="next secret")

    assert updated.password_hash != admin.password_hash
    assert hasher.verify("next secret", updated.password_hash)
    assert container.admin_repository.find_by_id(admin.id).password_hash == updated.password_hash


def test_duplicate_username_is_a_conflict(app) -> None:
    container.admin_repository.add("admin", "plain secret")

    with pytest.raises(ConflictError) as exc_info:
        container.admin_repository.add("admin", "other secret")

    assert exc_info.value.field == "username"


def test_each_call_runs_in_its_own_session_from_the_factory(app) -> None:
    opened = []

    def factory():
        session = SessionLocal()
        opened.append(session)
        return session

    repository = SqlAlchemyAdminRepository(factory)
    repository.add("admin", "plain secret")
    other = repository.add("other", "other secret")

    with pytest.raises(ConflictError):
        repository.update_credentials(other.id, username="admin")

    # the failed rename was rolled back
    assert repository.find_by_username("other").id == other.id
    assert len(opened) == 4


@pytest.fixture
def admin_env(monkeypatch):
    monkeypatch.setenv("ADMIN_USERNAME", "seeded")
    monkeypatch.setenv("ADMIN_PASSWORD", "seeded password")
    load_config.cache_clear()
    yield
    load_config.cache_clear()


def test_seed_creates_configured_admin_once(app, admin_env) -> None:
    setup_admin_user(container.admin_repository)
    first = container.admin_repository.find_by_username("seeded")
    setup_admin_user(container.admin_repository)
    second = container.admin_repository.find_by_username("seeded")

    assert first is not None
    assert hasher.verify("seeded password", first.password_hash)
    assert second.id == first.id


def test_seed_is_skipped_without_configuration(app) -> None:
    setup_admin_user(container.admin_repository)

    assert container.admin_repository.find_by_username("seeded") is None

from __future__ import annotations

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="invoicer-tests-")

os.environ["APP_ENV"] = "test"
os.environ["JWT_SECRET"] = "test-secret-0123456789-abcdefghijklmnopqrstuvwxyz"
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'invoicer.db')}"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ.pop("ADMIN_USERNAME", None)
os.environ.pop("ADMIN_PASSWORD", None)

import pytest  # noqa: E402

from invoicer.app import create_app  # noqa: E402
from invoicer.infrastructure.container import container  # noqa: E402
from invoicer.infrastructure.db import ENGINE, Base  # noqa: E402

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "correct horse battery"


@pytest.fixture
def app():
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    application = create_app()
    application.config.update(TESTING=True)
    yield application
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture
def admin(app):
    return container.admin_repository.add(ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def auth_headers(admin) -> dict[str, str]:
    token = container.token_service.issue(admin.id, admin.username)
    return {"Authorization": f"Bearer {token}"}

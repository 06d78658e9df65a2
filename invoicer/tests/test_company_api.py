from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError

from invoicer.infrastructure.container import container
from invoicer.infrastructure.db import SessionLocal
from invoicer.infrastructure.db.models import Company


def test_company_requires_authentication(client) -> None:
    assert client.get("/api/company").status_code == 401
    assert client.put("/api/company", json={"name": "ACME"}).status_code == 401


def test_first_read_creates_defaults(client, auth_headers) -> None:
    response = client.get("/api/company", headers=auth_headers)

    assert response.status_code == 200
    body = response.get_json()
    assert body["name"] == "Your Company Name"
    assert body["owner"] == ""
    assert body["postalCode"] == "10115"
    assert body["taxNumber"] == "DE123456789"
    assert body["iban"] == "DE89370400440532013000"
    assert body["swift"] == "DEUTDEFF"
    assert body["logo"] == ""
    assert "createdAt" in body and "updatedAt" in body


def test_repeated_reads_return_the_same_company(client, auth_headers) -> None:
    first = client.get("/api/company", headers=auth_headers).get_json()
    second = client.get("/api/company", headers=auth_headers).get_json()

    assert first["id"] == second["id"]
    session = SessionLocal()
    try:
        assert session.query(Company).count() == 1
    finally:
        session.close()


def test_update_applies_known_fields_and_ignores_others(client, auth_headers) -> None:
    response = client.put(
        "/api/company",
        json={"name": "ACME GmbH", "postalCode": "80331", "logo": "data:image/png;base64,AAA", "foo": 1},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["name"] == "ACME GmbH"
    assert body["postalCode"] == "80331"
    assert body["logo"] == "data:image/png;base64,AAA"
    assert body["city"] == "Berlin"
    assert "foo" not in body

    reread = client.get("/api/company", headers=auth_headers).get_json()
    assert reread["name"] == "ACME GmbH"
    assert reread["id"] == body["id"]


def test_update_creates_company_when_missing(client, auth_headers) -> None:
    response = client.put("/api/company", json={"owner": "Jane Doe"}, headers=auth_headers)

    assert response.status_code == 200
    assert response.get_json()["owner"] == "Jane Doe"
    assert response.get_json()["name"] == "Your Company Name"


def test_update_rejects_empty_required_field(client, auth_headers) -> None:
    response = client.put("/api/company", json={"name": "", "owner": ""}, headers=auth_headers)

    assert response.status_code == 400
    body = response.get_json()
    assert body["message"] == "validation error"
    assert body["errors"] == ["name: String should have at least 1 character"]


def test_update_rejects_values_longer_than_their_column(client, auth_headers) -> None:
    response = client.put(
        "/api/company",
        json={"swift": "X" * 33, "postalCode": "1" * 33, "logo": "data:" + "A" * 5000},
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert sorted(response.get_json()["errors"]) == [
        "postalCode: String should have at most 32 characters",
        "swift: String should have at most 32 characters",
    ]
    assert client.get("/api/company", headers=auth_headers).get_json()["swift"] == "DEUTDEFF"


def test_second_company_row_is_refused(app) -> None:
    container.company_repository.get_or_create()

    session = SessionLocal()
    try:
        session.add(Company())
        with pytest.raises(IntegrityError):
            session.flush()
        session.rollback()
    finally:
        session.close()

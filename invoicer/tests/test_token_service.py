from __future__ import annotations

from datetime import timedelta

import jwt
import pytest

from invoicer.application.services.tokens import DEFAULT_TTL, JwtTokenService
from invoicer.shared.errors import TokenExpiredError, TokenInvalidError

SECRET = "unit-test-secret-with-enough-length-0123456789"
OTHER_SECRET = "another-secret-with-enough-length-9876543210"


@pytest.fixture
def tokens() -> JwtTokenService:
    return JwtTokenService(SECRET)


def test_issue_and_validate_round_trip(tokens: JwtTokenService) -> None:
    token = tokens.issue(7, "admin")

    payload = tokens.validate(token)

    assert payload.subject_id == "7"
    assert payload.username == "admin"
    assert payload.expires_at is not None
    assert payload.issued_at is not None
    lifetime = payload.expires_at - payload.issued_at
    assert lifetime == DEFAULT_TTL


def test_expired_token_is_reported_as_expired(tokens: JwtTokenService) -> None:
    token = tokens.issue(1, "admin", ttl=timedelta(seconds=-10))

    with pytest.raises(TokenExpiredError):
        tokens.validate(token)


def test_token_signed_with_other_secret_is_invalid(tokens: JwtTokenService) -> None:
    foreign = JwtTokenService(OTHER_SECRET).issue(1, "admin")

    with pytest.raises(TokenInvalidError):
        tokens.validate(foreign)


@pytest.mark.parametrize("garbage", ["", "abc", "a.b.c", "eyJhbGciOiJIUzI1NiJ9.e30."])
def test_malformed_token_is_invalid(tokens: JwtTokenService, garbage: str) -> None:
    with pytest.raises(TokenInvalidError):
        tokens.validate(garbage)


def test_token_without_ttl_has_no_expiry(tokens: JwtTokenService) -> None:
    token = tokens.issue(1, "admin", ttl=None)

    claims = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert "exp" not in claims
    assert tokens.validate(token).expires_at is None


def test_default_ttl_is_configurable() -> None:
    tokens = JwtTokenService(SECRET, default_ttl=timedelta(minutes=5))

    payload = tokens.validate(tokens.issue(1, "admin"))

    assert payload.expires_at - payload.issued_at == timedelta(minutes=5)


def test_token_without_username_claim_is_invalid(tokens: JwtTokenService) -> None:
    token = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")

    with pytest.raises(TokenInvalidError):
        tokens.validate(token)


def test_empty_secret_is_rejected() -> None:
    with pytest.raises(ValueError):
        JwtTokenService("")

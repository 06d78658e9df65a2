from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from invoicer.interfaces.http.dto.base import CamelModel

# bcrypt only looks at the first 72 bytes of a password
PASSWORD_MAX_BYTES = 72


def _check_password_bytes(value: str | None) -> str | None:
    if value is not None and len(value.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"must be at most {PASSWORD_MAX_BYTES} bytes")
    return value


class LoginRequestDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, value: str) -> str:
        return _check_password_bytes(value)


class ChangeCredentialsRequestDTO(CamelModel):
    old_password: str
    new_username: str | None = Field(None, max_length=64)
    new_password: str | None = None

    @field_validator("old_password", "new_password")
    @classmethod
    def validate_password_length(cls, value: str | None) -> str | None:
        return _check_password_bytes(value)


class LoginResponseDTO(BaseModel):
    token: str
    username: str


class CredentialsUpdatedDTO(BaseModel):
    message: str = "credentials updated"
    token: str
    username: str

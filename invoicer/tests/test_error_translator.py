from __future__ import annotations

import pytest
from loguru import logger as loguru_logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from werkzeug.exceptions import NotFound

from invoicer.shared.errors import (
    CastError,
    ConflictError,
    ErrorTranslator,
    NotFoundError,
    TokenExpiredError,
    TokenInvalidError,
    UnauthorizedError,
    ValidationError,
)
from invoicer.shared.errors.validation import raise_validation_error


@pytest.fixture
def translator() -> ErrorTranslator:
    return ErrorTranslator()


@pytest.fixture
def log_messages():
    messages: list[str] = []
    sink_id = loguru_logger.add(lambda message: messages.append(message.record["message"]))
    yield messages
    loguru_logger.remove(sink_id)


class _Failure:
    def __init__(self, message: str | None = None, status_code: object = None) -> None:
        self.message = message
        self.status_code = status_code


def test_validation_errors_become_message_list(translator: ErrorTranslator) -> None:
    error = ValidationError({"name": "name: required", "city": "city: required"})

    status, body = translator.translate(error)

    assert status == 400
    assert body == {"message": "validation error", "errors": ["name: required", "city: required"]}


def test_cast_error(translator: ErrorTranslator) -> None:
    status, body = translator.translate(CastError("abc"))

    assert status == 400
    assert body == {"message": "invalid ID", "error": 'Cast to int failed for value "abc"'}


def test_conflict_names_first_key_and_keeps_context(translator: ErrorTranslator) -> None:
    error = ConflictError(("invoiceNumber",), code="DUPLICATE_INVOICE_NUMBER", context={"invoiceNumber": "A-1"})

    status, body = translator.translate(error)

    assert status == 409
    assert body == {
        "message": "invoiceNumber already exists",
        "field": "invoiceNumber",
        "error": "DUPLICATE_INVOICE_NUMBER",
        "invoiceNumber": "A-1",
    }


def test_token_errors(translator: ErrorTranslator) -> None:
    assert translator.translate(TokenInvalidError("signature mismatch")) == (401, {"message": "invalid token"})
    assert translator.translate(TokenExpiredError()) == (401, {"message": "token expired"})


def test_other_app_errors_use_their_status(translator: ErrorTranslator) -> None:
    assert translator.translate(NotFoundError("invoice")) == (404, {"message": "invoice not found"})
    assert translator.translate(UnauthorizedError("nope")) == (401, {"message": "nope"})


def test_werkzeug_http_errors_keep_their_code(translator: ErrorTranslator) -> None:
    status, body = translator.translate(NotFound("no such route"))

    assert status == 404
    assert body == {"message": "no such route"}


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (None, (500, {"message": "server error"})),
        ("a bare string", (500, {"message": "server error"})),
        (RuntimeError(), (500, {"message": "server error"})),
        (RuntimeError("boom"), (500, {"message": "boom"})),
        (_Failure("teapot", 418), (418, {"message": "teapot"})),
        (_Failure("zero", 0), (500, {"message": "zero"})),
        (_Failure("negative", -1), (500, {"message": "negative"})),
        (_Failure("boolean", True), (500, {"message": "boolean"})),
        (_Failure(None, "404"), (500, {"message": "server error"})),
    ],
)
def test_default_branch(translator: ErrorTranslator, error, expected) -> None:
    assert translator.translate(error) == expected


def test_trace_only_included_when_enabled() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError as exc:
        error = exc

    _, hidden = ErrorTranslator().translate(error)
    _, shown = ErrorTranslator(include_trace=True).translate(error)

    assert "stack" not in hidden
    assert "RuntimeError: boom" in shown["stack"]


def test_trace_never_added_to_classified_errors() -> None:
    _, body = ErrorTranslator(include_trace=True).translate(CastError("x"))

    assert "stack" not in body


def test_every_translation_logs_message_and_stack(translator: ErrorTranslator, log_messages) -> None:
    translator.translate(None)
    translator.translate(RuntimeError("boom"))

    assert log_messages[0] == "Error: None"
    assert log_messages[1] == "Stack: None"
    assert log_messages[2] == "Error: boom"
    assert log_messages[3].startswith("Stack: ")


def test_pydantic_errors_are_keyed_by_field() -> None:
    class Payload(BaseModel):
        name: str
        count: int

    with pytest.raises(ValidationError) as exc_info:
        try:
            Payload.model_validate({"count": "many"})
        except PydanticValidationError as exc:
            raise_validation_error(exc)

    assert exc_info.value.field_errors == {
        "name": "name: Field required",
        "count": "count: Input should be a valid integer, unable to parse string as an integer",
    }

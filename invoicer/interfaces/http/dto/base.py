from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NonEmptyStr = Annotated[str, Field(min_length=1)]


def bounded_str(max_length: int, *, min_length: int = 1) -> Any:
    """String type that fits a ``String(max_length)`` column."""
    return Annotated[str, Field(min_length=min_length, max_length=max_length)]


class CamelModel(BaseModel):
    """Reads camelCase or snake_case keys and writes camelCase with ``by_alias``."""

    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True)

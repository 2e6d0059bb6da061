"""Shared pydantic base and validation helpers."""

from typing import Any, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from core.errors import ErrorCode, ValidationError

M = TypeVar("M", bound=BaseModel)


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def _describe(error: Any) -> str:
    field = ".".join(str(part) for part in error.get("loc", ())) or "request"
    if error.get("type") == "missing":
        return f"{field} is required"
    if error.get("type") == "value_error":
        return str(error.get("ctx", {}).get("error", error.get("msg", "")))
    return f"{field}: {error.get('msg', 'invalid value')}"


def parse_model(model: type[M], data: Any) -> M:
    """Validate ``data`` into ``model`` or raise a caller-facing ValidationError."""
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object", code=ErrorCode.INVALID_REQUEST)
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        messages = [_describe(err) for err in e.errors()]
        raise ValidationError(messages[0], errors=messages) from e

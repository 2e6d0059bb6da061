"""DynamoDB item (de)serialization and error translation."""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import Decimal
from typing import Any

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel

from core.errors import BackpackError, ErrorCode

logger = logging.getLogger(__name__)

_serializer = TypeSerializer()
_deserializer = TypeDeserializer()


def _plain(value: Any) -> Any:
    """Decimal -> int/float, recursively."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def to_item(model: BaseModel) -> dict[str, Any]:
    # DynamoDB rejects floats; route numbers through Decimal.
    document = json.loads(model.model_dump_json(by_alias=True), parse_float=Decimal)
    return {
        key: _serializer.serialize(value)
        for key, value in document.items()
        if value is not None
    }


def from_item(item: dict[str, Any]) -> dict[str, Any]:
    return {key: _plain(_deserializer.deserialize(value)) for key, value in item.items()}


def is_conditional_failure(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


@contextmanager
def storage_errors(action: str) -> Iterator[None]:
    """Translate unexpected DynamoDB failures into STORAGE_ERROR."""
    try:
        yield
    except (ClientError, BotoCoreError) as e:
        logger.error("DynamoDB %s failed: %s", action, e)
        raise BackpackError(f"DynamoDB {action} failed: {e}", code=ErrorCode.STORAGE_ERROR) from e

"""Strict decoding of JSON success bodies into the response dataclasses.

A body that is not JSON, misses a required field or carries a value of the wrong type raises
MalformedResponseError. Values are never coerced. Unknown extra fields are ignored.
"""

from __future__ import annotations

import dataclasses
import json
import types
from enum import Enum
from json import JSONDecodeError
from typing import TYPE_CHECKING, Any, TypeVar, Union, get_args, get_origin, get_type_hints

from marshmallow.exceptions import ValidationError

from deepl_bindings.exceptions import MalformedResponseError
from deepl_bindings.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from dataclasses_json import DataClassJsonMixin

__all__: list[str] = ["decode_json", "load_json"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

T = TypeVar("T", bound="DataClassJsonMixin")


def load_json(body: bytes) -> Any:
    """Parse a response body as JSON.

    Raises:
        MalformedResponseError: If the body is not valid UTF-8 JSON.
    """
    try:
        return json.loads(body)
    except (JSONDecodeError, UnicodeDecodeError) as err:
        msg: str = f"The response body is not valid JSON: {err}"
        raise MalformedResponseError(msg) from err


def _matches(value: Any, expected: Any) -> bool:
    """Check a raw JSON value against a field annotation without any coercion."""
    origin = get_origin(expected)
    if origin in (Union, types.UnionType):
        return any(_matches(value, arg) for arg in get_args(expected))
    if expected is type(None):
        return value is None
    if origin is list:
        (item_type,) = get_args(expected)
        return isinstance(value, list) and all(_matches(item, item_type) for item in value)
    if dataclasses.is_dataclass(expected):
        return isinstance(value, dict) and _missing_or_invalid(value, expected) is None
    if isinstance(expected, type) and issubclass(expected, Enum):
        return any(value == member.value for member in expected)
    # bool is an int subclass but never a valid number here
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if expected is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, expected)


def _missing_or_invalid(payload: dict[str, Any], model: type) -> str | None:
    """Return a description of the first field of `payload` not matching `model`, or None."""
    hints: dict[str, Any] = get_type_hints(model)
    for field in dataclasses.fields(model):
        if field.name not in payload:
            if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                return f"missing field '{field.name}'"
            continue
        if not _matches(payload[field.name], hints[field.name]):
            return f"unexpected value for '{field.name}': {payload[field.name]!r}"
    return None


def decode_json(body: bytes, model: type[T]) -> T:
    """Decode a JSON body into `model`, rejecting any structural mismatch.

    The payload is checked against the field annotations first, so dataclasses_json never gets
    the chance to coerce a value of the wrong type.

    Args:
        body (bytes): Raw response body.
        model (type[T]): dataclasses_json model to build.

    Returns:
        T: The decoded instance.

    Raises:
        MalformedResponseError: If the body does not match the structure of `model`.
    """
    payload: Any = load_json(body)
    if not isinstance(payload, dict):
        msg: str = f"Expected a JSON object for {model.__name__}, got {type(payload).__name__}"
        raise MalformedResponseError(msg)

    problem: str | None = _missing_or_invalid(payload, model)
    if problem is not None:
        msg = f"The response data is invalid for {model.__name__}: {problem}"
        raise MalformedResponseError(msg)

    try:
        instance: T = model.from_dict(payload, infer_missing=False)
    except (ValidationError, KeyError, TypeError, ValueError, AttributeError) as err:
        msg = f"The response data is invalid for {model.__name__}: {err}"
        raise MalformedResponseError(msg) from err

    logger.debug("Decoded %s", instance)
    return instance

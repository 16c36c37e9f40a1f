"""Helpers for reading request input: pagination and JSON bodies."""

from __future__ import annotations

import dataclasses
import json
import re
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_TYPE_NAMES = {"int": int, "str": str, "float": float, "bool": bool}

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class Pagination:
    """Resolved paging parameters."""

    page: int
    page_size: int
    limit: int
    offset: int


def _parse_int(text: str | None) -> int | None:
    if text is None or not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def paginate(page: str | None, page_size: str | None) -> Pagination:
    """Resolve paging from raw query values, falling back to page 1 of 10.

    The limit follows the page number, as the service has always done.
    """
    page_number = _parse_int(page)
    size = _parse_int(page_size)
    if page_number is None or page_number < 1:
        page_number = DEFAULT_PAGE
    if size is None or size < 1:
        size = DEFAULT_PAGE_SIZE
    return Pagination(
        page=page_number,
        page_size=size,
        limit=page_number,
        offset=(page_number - 1) * size,
    )


def _json_kind(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "null"


def _field_type(field: dataclasses.Field) -> Any:
    """Return the declared type of a field, resolving simple string annotations."""
    declared = field.type
    if isinstance(declared, str):
        return _TYPE_NAMES.get(declared.strip(), declared)
    return declared


def _coerce(value: Any, expected: Any, owner: str, name: str) -> Any:
    def mismatch() -> ValueError:
        type_name = getattr(expected, "__name__", str(expected))
        return ValueError(
            f"json: cannot unmarshal {_json_kind(value)} {value!r} "
            f"into field {owner}.{name} of type {type_name}"
        )

    if expected is bool:
        if not isinstance(value, bool):
            raise mismatch()
        return value
    if expected is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise mismatch()
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise mismatch()
        return value
    if expected is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise mismatch()
        return float(value)
    if expected is str:
        if not isinstance(value, str):
            raise mismatch()
        return value
    return value


def bind_json(body: bytes | str, cls: type[T]) -> T:
    """Decode a JSON object into an instance of the dataclass ``cls``.

    Unknown keys are ignored, key matching is case-insensitive, missing or
    null members keep their defaults. Raises ValueError on malformed input.
    """
    payload = json.loads(body)
    if payload is None:
        return cls()
    if not isinstance(payload, dict):
        raise ValueError(
            f"json: cannot unmarshal {_json_kind(payload)} into {cls.__name__}"
        )

    fields = {f.name: f for f in dataclasses.fields(cls)}
    folded = {name.casefold(): name for name in fields}
    values: dict[str, Any] = {}
    for key, value in payload.items():
        name = key if key in fields else folded.get(key.casefold())
        if name is None or value is None:
            continue
        values[name] = _coerce(
            value, _field_type(fields[name]), cls.__name__, name
        )
    return cls(**values)
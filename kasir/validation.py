"""Validation of request dataclasses from rules kept in field metadata."""

from __future__ import annotations

import dataclasses
import functools
import re
from dataclasses import dataclass
from typing import Any, Callable

_NUMERIC = re.compile(r"^[-+]?[0-9]+(?:\.[0-9]+)?$")
_UUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$")


@dataclass(frozen=True)
class _FieldError:
    namespace: str
    field: str
    tag: str
    param: str
    value: Any


class ValidationError(Exception):
    """Raised when data fails validation; ``errors`` maps fields to messages."""

    def __init__(self, errors: dict[str, str] | None) -> None:
        self.errors = errors
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.errors is not None:
            return "validation failed"
        return ""


def _is_zero(value: Any) -> bool:
    return value is None or value == "" or (not isinstance(value, str) and not value)


def _check_min(value: Any, param: str) -> bool:
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) >= int(param)
    return value >= float(param)


def _check_numeric(value: Any, param: str) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return isinstance(value, str) and bool(_NUMERIC.match(value))


def _check_uuid(value: Any, param: str) -> bool:
    return isinstance(value, str) and bool(_UUID.match(value))


_CHECKS: dict[str, Callable[[Any, str], bool]] = {
    "required": lambda value, param: not _is_zero(value),
    "min": _check_min,
    "numeric": _check_numeric,
    "uuid": _check_uuid,
}


def _is_text(value: Any) -> bool:
    return isinstance(value, (str, list, tuple, dict))


def _en_min(err: _FieldError) -> str:
    if _is_text(err.value):
        unit = "character" if err.param == "1" else "characters"
        return f"{err.field} must be at least {err.param} {unit} in length"
    return f"{err.field} must be {err.param} or greater"


def _id_min(err: _FieldError) -> str:
    if _is_text(err.value):
        return f"panjang minimal {err.field} adalah {err.param} karakter"
    return f"{err.field} harus {err.param} atau lebih besar"


_TRANSLATIONS: dict[str, dict[str, Callable[[_FieldError], str]]] = {
    "en": {
        "required": lambda err: f"{err.field} is a required field",
        "min": _en_min,
        "numeric": lambda err: f"{err.field} must be a valid numeric value",
        "uuid": lambda err: f"{err.field} must be a valid UUID",
    },
    "id": {
        "required": lambda err: f"{err.field} wajib diisi",
        "min": _id_min,
        "numeric": lambda err: f"{err.field} harus berupa nilai numerik yang valid",
        "uuid": lambda err: f"{err.field} harus berupa UUID yang valid",
    },
}


class Validator:
    """Checks dataclass instances against the ``validate`` rules of their fields."""

    def _field_errors(self, data: Any) -> list[_FieldError]:
        owner = type(data).__name__
        errors = []
        for field in dataclasses.fields(data):
            rules = field.metadata.get("validate")
            if not rules:
                continue
            value = getattr(data, field.name)
            for rule in rules.split(","):
                tag, _, param = rule.partition("=")
                check = _CHECKS.get(tag)
                if check is None:
                    raise ValueError(f"undefined validation function {tag!r} on field {field.name!r}")
                if not check(value, param):
                    errors.append(
                        _FieldError(f"{owner}.{field.name}", field.name, tag, param, value)
                    )
                    break
        return errors

    def validate_with_lang(self, data: Any, lang: str) -> None:
        """Validate ``data``; messages are Indonesian for ``"id"``, English otherwise."""
        if not dataclasses.is_dataclass(data) or isinstance(data, type):
            raise TypeError(f"validation failed: cannot validate {type(data).__name__}")
        translations = _TRANSLATIONS["id" if lang == "id" else "en"]
        errors = {err.namespace: translations[err.tag](err) for err in self._field_errors(data)}
        if errors:
            raise ValidationError(errors)

    def validate(self, data: Any) -> None:
        """Validate ``data`` with English messages."""
        self.validate_with_lang(data, "en")

    def error_map(self, error: BaseException | None, lang: str = "en") -> dict[str, str] | None:
        """Return the field messages carried by a validation error, else None.

        The messages keep the language they were produced in.
        """
        if isinstance(error, ValidationError):
            return error.errors
        return None


@functools.lru_cache(maxsize=None)
def new_validation() -> Validator:
    """Return the shared validator."""
    return Validator()
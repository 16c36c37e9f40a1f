"""Domain records and request bodies."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

NIL_UUID = uuid.UUID(int=0)
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _format_time(value: datetime) -> str:
    """Format a timestamp as RFC 3339 with trailing fraction zeros removed."""
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset()
    if not offset:
        return text + "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, rest = divmod(abs(total), 3600)
    return f"{text}{sign}{hours:02d}:{rest // 60:02d}"


@dataclass
class Category:
    """A product category."""

    id: uuid.UUID = NIL_UUID
    name: str = ""
    description: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "created_at": _format_time(self.created_at),
            "updated_at": _format_time(self.updated_at),
        }


@dataclass
class Product:
    """A product as stored."""

    id: uuid.UUID = NIL_UUID
    name: str = ""
    price: int = 0
    stock: int = 0
    category_id: uuid.UUID = NIL_UUID
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "price": self.price,
            "stock": self.stock,
            "category_id": str(self.category_id),
            "created_at": _format_time(self.created_at),
            "updated_at": _format_time(self.updated_at),
        }


@dataclass
class ProductCategory:
    """A product joined with the name of its category."""

    id: uuid.UUID = NIL_UUID
    name: str = ""
    price: int = 0
    stock: int = 0
    category_name: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "name": self.name,
            "price": self.price,
            "stock": self.stock,
            "category_name": self.category_name,
            "created_at": _format_time(self.created_at),
            "updated_at": _format_time(self.updated_at),
        }


@dataclass
class CategoryRequest:
    """Body of a create or update category request."""

    name: str = field(default="", metadata={"validate": "required,min=3"})
    description: str = field(default="", metadata={"validate": "required"})


@dataclass
class ProductRequest:
    """Body of a create or update product request."""

    name: str = field(default="", metadata={"validate": "required,min=3"})
    price: int = field(default=0, metadata={"validate": "required,numeric"})
    stock: int = field(default=0, metadata={"validate": "required,min=0,numeric"})
    category_id: str = field(default="", metadata={"validate": "required,uuid"})
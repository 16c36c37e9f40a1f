"""The JSON envelope every endpoint answers with."""

from __future__ import annotations

import json as jsonlib
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from werkzeug.wrappers import Response


def _encode(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_encode(item) for item in value]
    if isinstance(value, dict):
        return {key: _encode(item) for key, item in value.items()}
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    return value


@dataclass
class Meta:
    """Paging information for list responses; zero values are omitted."""

    total: int = 0
    page: int = 0
    limit: int = 0

    def to_dict(self) -> dict[str, int]:
        items = {"total": self.total, "page": self.page, "limit": self.limit}
        return {key: value for key, value in items.items() if value}


@dataclass
class ApiResponse:
    """A response envelope with status, message, data, error and meta."""

    status: str
    message: str = ""
    data: Any = None
    error: str = ""
    meta: Meta | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"status": self.status}
        if self.message:
            result["message"] = self.message
        if self.data is not None:
            result["data"] = _encode(self.data)
        if self.error:
            result["error"] = self.error
        if self.meta is not None:
            result["meta"] = self.meta.to_dict()
        return result

    def json(self, status_code: int) -> Response:
        """Render as a compact JSON HTTP response."""
        try:
            payload = jsonlib.dumps(
                self.to_dict(), ensure_ascii=False, separators=(",", ":")
            )
        except (TypeError, ValueError) as exc:
            return Response(
                str(exc) + "\n", status=500, content_type="text/plain; charset=utf-8"
            )
        return Response(
            payload.encode("utf-8"), status=status_code, content_type="application/json"
        )

    def text(self, status_code: int) -> Response:
        """Render as plain text: the error if there is one, else the message."""
        body = self.error or self.message
        return Response(body.encode("utf-8"), status=status_code, content_type="text/plain")


def ok(message: str, data: Any = None, meta: Meta | None = None) -> ApiResponse:
    return ApiResponse(status="OK", message=message, data=data, meta=meta)


def failed(message: str, error: BaseException | str) -> ApiResponse:
    return ApiResponse(status="FAILED", message=message, error=str(error))


def created(message: str, data: Any = None) -> ApiResponse:
    return ApiResponse(status="CREATED", message=message, data=data)
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel


class ApiResponse(BaseModel):
    ok: bool
    data: Any = None
    error: str | None = None
    timestamp: str


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _plain(data: Any) -> Any:
    """Dump response models, alone or in a list, to JSON-ready dicts."""
    if isinstance(data, BaseModel):
        return data.model_dump()
    if isinstance(data, list):
        return [_plain(item) for item in data]
    return data


def ok(data: Any) -> ApiResponse:
    return ApiResponse(ok=True, data=_plain(data), timestamp=_now_iso())


def err(message: str) -> ApiResponse:
    return ApiResponse(ok=False, data=None, error=message, timestamp=_now_iso())

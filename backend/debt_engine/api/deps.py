from __future__ import annotations

from typing import TypeVar

from fastapi import HTTPException

from debt_engine.models.errors import EngineError

T = TypeVar("T")


def unwrap(result: T | EngineError) -> T:
    """Return an engine result, or raise 422 carrying the engine's error value."""
    if isinstance(result, EngineError):
        raise HTTPException(status_code=422, detail=result.model_dump(mode="json"))
    return result

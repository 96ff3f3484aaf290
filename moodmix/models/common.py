"""Shared response models used across all endpoints."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response: {"detail": "message"}."""

    detail: str


class SuccessResponse(BaseModel):
    """Generic success response with optional fields."""

    ok: bool = True
    deleted: int | None = None


# OpenAPI ``responses=`` entries for routes that raise HTTPException
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input"}}
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Not found"}}

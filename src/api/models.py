# src/api/models.py - v2
"""HTTP request/response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ScanRequest(BaseModel):
    """Body of the scan-text / scan-url / scan-news endpoints."""

    text: str | None = None
    url: str | None = None


class CacheStatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cached_responses: int = Field(alias="cachedResponses")
    message: str = "Cached responses save API quota by returning instant results"


class HealthResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "healthy"
    timestamp: str
    environment: str
    provider: str
    cache_size: int = Field(alias="cacheSize")


class SuccessResponse(BaseModel):
    success: bool = True


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None

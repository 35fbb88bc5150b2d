# src/api/routes.py - v1
"""HTTP routes: scans, history, cache administration, health."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from fraudshield.api.facade import ScanService
from fraudshield.api.models import (
    CacheStatsResponse,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    ScanRequest,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")
health_router = APIRouter(tags=["health"])


def _service(request: Request) -> ScanService:
    return request.app.state.service


async def _scan(request: Request, payload: ScanRequest, scan_type: str) -> dict:
    record = await _service(request).scan(scan_type, text=payload.text, url=payload.url)
    return record.to_json_dict()


# --- Scans ---


@router.post("/scan-text", tags=["scan"])
async def scan_text(request: Request, payload: ScanRequest):
    return await _scan(request, payload, "scam")


@router.post("/scan-url", tags=["scan"])
async def scan_url(request: Request, payload: ScanRequest):
    return await _scan(request, payload, "url")


@router.post("/scan-news", tags=["scan"])
async def scan_news(request: Request, payload: ScanRequest):
    return await _scan(request, payload, "news")


# --- History ---


@router.get("/history", tags=["history"])
async def list_history(request: Request):
    records = await _service(request).history.list_records()
    return [r.to_json_dict() for r in records]


@router.delete("/history", tags=["history"], response_model=SuccessResponse)
async def clear_history(request: Request):
    await _service(request).history.clear()
    return SuccessResponse()


@router.delete("/history/{record_id}", tags=["history"], response_model=SuccessResponse)
async def delete_history_record(request: Request, record_id: str):
    removed = await _service(request).history.delete(record_id)
    if not removed:
        logger.debug("Delete requested for unknown record %s", record_id)
    return SuccessResponse()


@router.get("/record/{record_id}", tags=["history"])
async def get_record(request: Request, record_id: str):
    record = await _service(request).history.get(record_id)
    if record is None:
        return JSONResponse(
            status_code=404,
            content=ErrorResponse(error="Record not found").model_dump(exclude_none=True),
        )
    return record.to_json_dict()


# --- Cache ---


@router.get("/cache/stats", tags=["cache"])
async def cache_stats(request: Request):
    stats = _service(request).cache_stats()
    return CacheStatsResponse(cached_responses=stats.entries).model_dump(by_alias=True)


@router.delete("/cache", tags=["cache"], response_model=MessageResponse)
async def clear_cache(request: Request):
    await _service(request).clear_cache()
    return MessageResponse(message="Cache cleared successfully")


# --- Health ---


@health_router.get("/health")
async def health(request: Request):
    service = _service(request)
    return HealthResponse(
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=service.settings.environment,
        provider=service.provider_name,
        cache_size=service.cache_stats().entries,
    ).model_dump(by_alias=True)

# tests/unit/api/test_unit_routes.py - v1
"""HTTP surface tests through FastAPI's TestClient (no real backend)."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from fraudshield.analysis.mock_analyzer import MockAnalyzer
from fraudshield.api.app import create_app
from fraudshield.api.facade import build_service


@pytest.fixture
def service(settings, memory_cache, history, counting_analyzer):
    return build_service(
        settings, cache_store=memory_cache, analyzer=counting_analyzer, history=history
    )


@pytest.fixture
def client(service):
    with TestClient(create_app(service=service)) as c:
        yield c


class TestScanEndpoints:
    @pytest.mark.parametrize("path,scan_type", [
        ("/api/scan-text", "scam"),
        ("/api/scan-url", "url"),
        ("/api/scan-news", "news"),
    ])
    def test_scan(self, client, path, scan_type):
        resp = client.post(path, json={"text": "Some content"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["type"] == scan_type
        assert body["userInput"] == "Some content"
        assert body["verdict"] == "safe"
        assert body["cached"] is False
        assert set(body) >= {"id", "timestamp", "score", "reason", "category", "suggestedSources"}

    def test_url_field(self, client):
        resp = client.post("/api/scan-url", json={"url": "http://bit.ly/x"})
        assert resp.json()["userInput"] == "http://bit.ly/x"

    @pytest.mark.parametrize("payload", [{}, {"text": "   "}, {"text": "", "url": ""}])
    def test_missing_content(self, client, counting_analyzer, payload):
        resp = client.post("/api/scan-text", json=payload)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing content to scan."}
        assert counting_analyzer.call_count == 0

    def test_repeat_is_cached(self, client, counting_analyzer):
        client.post("/api/scan-text", json={"text": "Hello"})
        second = client.post("/api/scan-text", json={"text": "  hello "}).json()
        assert second["cached"] is True
        assert counting_analyzer.call_count == 1


class TestHistoryEndpoints:
    def test_history_newest_first(self, client):
        first = client.post("/api/scan-text", json={"text": "one"}).json()
        second = client.post("/api/scan-news", json={"text": "two"}).json()
        ids = [r["id"] for r in client.get("/api/history").json()]
        assert ids == [second["id"], first["id"]]

    def test_get_record(self, client):
        record = client.post("/api/scan-text", json={"text": "one"}).json()
        assert client.get(f"/api/record/{record['id']}").json() == record

    def test_record_not_found(self, client):
        resp = client.get("/api/record/does-not-exist")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Record not found"}

    def test_delete_record(self, client):
        record = client.post("/api/scan-text", json={"text": "one"}).json()
        assert client.delete(f"/api/history/{record['id']}").json() == {"success": True}
        assert client.get("/api/history").json() == []

    def test_delete_unknown_record_still_succeeds(self, client):
        assert client.delete("/api/history/nope").json() == {"success": True}

    def test_clear_history(self, client):
        client.post("/api/scan-text", json={"text": "one"})
        assert client.delete("/api/history").json() == {"success": True}
        assert client.get("/api/history").json() == []


class TestCacheEndpoints:
    def test_stats(self, client):
        client.post("/api/scan-text", json={"text": "one"})
        body = client.get("/api/cache/stats").json()
        assert body["cachedResponses"] == 1
        assert body["message"]

    def test_clear(self, client, memory_cache):
        client.post("/api/scan-text", json={"text": "one"})
        resp = client.delete("/api/cache")
        assert resp.json() == {"message": "Cache cleared successfully"}
        assert memory_cache.size() == 0
        assert client.get("/api/cache/stats").json()["cachedResponses"] == 0

    def test_clear_cache_keeps_history(self, client):
        client.post("/api/scan-text", json={"text": "one"})
        client.delete("/api/cache")
        assert len(client.get("/api/history").json()) == 1


class TestHealth:
    def test_health(self, client):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["environment"] == "development"
        assert body["provider"] == "counting"
        assert body["cacheSize"] == 0
        assert body["timestamp"]


class TestErrors:
    def test_unhandled_error_development(self, service):
        service.history.append = AsyncMock(side_effect=RuntimeError("disk gone"))
        with TestClient(create_app(service=service), raise_server_exceptions=False) as c:
            resp = c.post("/api/scan-text", json={"text": "one"})
        assert resp.status_code == 500
        assert resp.json() == {"error": "Internal server error", "message": "disk gone"}

    def test_unhandled_error_production(self, settings, memory_cache, history):
        prod = settings.model_copy(update={"environment": "production"})
        service = build_service(prod, cache_store=memory_cache, analyzer=MockAnalyzer(), history=history)
        service.history.append = AsyncMock(side_effect=RuntimeError("disk gone"))
        with TestClient(create_app(service=service), raise_server_exceptions=False) as c:
            resp = c.post("/api/scan-text", json={"text": "one"})
        assert resp.json()["message"] == "Something went wrong"


class TestStartup:
    def test_lifespan_loads_cache(self, settings):
        with TestClient(create_app(settings)) as c:
            assert c.get("/api/cache/stats").json()["cachedResponses"] == 0
        assert c.app.state.service.cache_stats().loaded is True

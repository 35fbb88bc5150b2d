# src/storage/history.py - v1
"""History ledger: finished scan records in one JSON array, newest first.

The orchestrator never calls this; the API layer and CLI append the
record it returns. Same persistence discipline as the cache: one lock
around read-modify-write, atomic file replacement. A missing file is an
empty ledger; an unreadable one is logged and treated as empty, and a
failed write is logged without failing the scan.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from fraudshield.core.models import ScanRecord
from fraudshield.storage.local_writer import read_json, write_json_atomic

logger = logging.getLogger(__name__)


class HistoryLedger:
    """Keyed record store backed by a JSON file."""

    def __init__(self, history_path: Path | str) -> None:
        self._path = Path(history_path).expanduser()
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def append(self, record: ScanRecord) -> None:
        """Insert a record at the front of the ledger."""
        async with self._lock:
            records = self._read()
            records.insert(0, record)
            self._write(records)

    async def list_records(self) -> list[ScanRecord]:
        """All records, newest first."""
        async with self._lock:
            return self._read()

    async def get(self, record_id: str) -> ScanRecord | None:
        async with self._lock:
            for record in self._read():
                if record.id == record_id:
                    return record
        return None

    async def delete(self, record_id: str) -> bool:
        """Remove one record. Returns False when the id is unknown."""
        async with self._lock:
            records = self._read()
            kept = [r for r in records if r.id != record_id]
            if len(kept) == len(records):
                return False
            self._write(kept)
            return True

    async def clear(self) -> None:
        async with self._lock:
            self._write([])
        logger.info("History cleared")

    def _read(self) -> list[ScanRecord]:
        try:
            data = read_json(self._path, default=[])
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to read history %s: %s", self._path, e)
            return []
        if not isinstance(data, list):
            logger.error("Ignoring history %s: expected a JSON array", self._path)
            return []

        records: list[ScanRecord] = []
        for raw in data:
            try:
                records.append(ScanRecord.model_validate(raw))
            except ValidationError as e:
                logger.warning("Skipping invalid history record: %s", e)
        return records

    def _write(self, records: list[ScanRecord]) -> None:
        try:
            write_json_atomic(self._path, [r.to_json_dict() for r in records])
        except OSError as e:
            logger.error("Failed to save history %s: %s", self._path, e)

# src/storage/local_writer.py - v3
"""Local filesystem JSON persistence shared by the cache and history files.

Writes go to a temp file in the target directory and are moved into
place with ``os.replace``, so a crash mid-write leaves the previous file
intact and readers never observe a partial document.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def write_json_atomic(path: Path, payload: Any, indent: int = 2) -> None:
    """Serialize ``payload`` to ``path`` atomically.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as fh:
            tmp_name = fh.name
            json.dump(payload, fh, indent=indent, ensure_ascii=False)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)


def read_json(path: Path, default: Any) -> Any:
    """Read a JSON document, returning ``default`` for a missing or blank file.

    Raises:
        OSError: On read failure.
        json.JSONDecodeError: On invalid JSON.
    """
    if not path.exists():
        return default
    raw = path.read_text(encoding="utf-8")
    if not raw.strip():
        return default
    return json.loads(raw)

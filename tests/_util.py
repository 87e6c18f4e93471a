"""Shared helpers for the json-rules test-suite (std-lib only)."""
from __future__ import annotations

import contextlib
import json
import tempfile
from pathlib import Path
from typing import Any

# ------------------------------------------------------------------ #
# Sample documents                                                   #
# ------------------------------------------------------------------ #
USER_DOC: dict[str, Any] = {
    "id": 123,
    "name": "Ada Lovelace",
    "email": "ada@example.com",
    "active": True,
    "score": 9.5,
    "nickname": None,
    "tags": ["math", "poetry"],
    "address": {"city": "London", "zip": "W1", "geo": {"lat": 51.5, "lng": -0.12}},
    "orders": [
        {"id": 1, "status": "paid", "total": 10},
        {"id": 2, "status": "shipped", "total": 25.5},
    ],
}

# ------------------------------------------------------------------ #
# Tiny helpers                                                       #
# ------------------------------------------------------------------ #
def tmp_json(obj: Any) -> Path:
    """Write *obj* to a temp file and return its Path (caller must unlink)."""
    fh = tempfile.NamedTemporaryFile(delete=False, suffix=".json")
    fh.close()
    Path(fh.name).write_text(json.dumps(obj), encoding="utf-8")
    return Path(fh.name)

def tmp_text(text: str) -> Path:
    fh = tempfile.NamedTemporaryFile(delete=False, suffix=".json")
    fh.close()
    Path(fh.name).write_text(text, encoding="utf-8")
    return Path(fh.name)

@contextlib.contextmanager
def tmp_dir():
    """Yield a temporary directory Path that auto-cleans on exit."""
    td = tempfile.TemporaryDirectory()
    try:
        yield Path(td.name)
    finally:
        td.cleanup()

"""
loader.py - turn caller input into a frozen document.

Public API
----------
load_document(source) : decode text / read a file / copy pre-decoded data
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

from .errors import InvalidJSONError

__all__ = ["load_document", "decode"]

# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def decode(text: str | bytes) -> Any:
    """Decode JSON text, raising :class:`InvalidJSONError` on a syntax error."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidJSONError(exc.msg, lineno=exc.lineno, colno=exc.colno) from exc
    except UnicodeDecodeError as exc:
        raise InvalidJSONError(str(exc)) from exc


def _read(path: Path) -> Any:
    """Read & decode a JSON file, raising crisp errors on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Document not found: {path}") from exc
    return decode(text)


# --------------------------------------------------------------------------- #
# Public utilities                                                            #
# --------------------------------------------------------------------------- #

def load_document(source: Any) -> Any:
    """Return the document described by *source*.

    * ``str`` / ``bytes`` - JSON text, decoded.
    * ``Path`` - a JSON file on disk, read and decoded.
    * anything else - already-decoded data, deep-copied so the caller's later
      mutations cannot leak into validation.
    """
    if isinstance(source, (str, bytes, bytearray)):
        return decode(source)
    if isinstance(source, Path):
        return _read(source)
    return copy.deepcopy(source)

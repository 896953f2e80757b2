"""Shared parsing helpers for outletmap models.

Remote payloads are loosely typed; these helpers coerce the shapes the
upstream service is known to send (``null``, empty strings, bare strings
where a list is expected) before pydantic validation runs.
"""

from __future__ import annotations

from typing import Any


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def string_list(value: Any) -> list[str] | None:
    """Coerce *value* into a list of strings, keeping ``None`` distinct from ``[]``.

    A bare string becomes a one-item list. A list holding anything other
    than strings, or any other shape, yields ``None``; only a real empty
    list yields ``[]``.
    """
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple)):
        return None
    if not all(isinstance(item, str) for item in value):
        return None
    return list(value)

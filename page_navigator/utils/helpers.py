"""Helper utilities for request value parsing."""

from __future__ import annotations

from typing import Optional

import pandas as pd


def normalize_text(value: object) -> str:
    """Normalize a value into a stripped string, or empty string for nulls."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        value = value[-1] if value else ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value).strip()


def parse_int(value: object, default: Optional[int] = None) -> Optional[int]:
    """Parse an integer from query/session values, returning ``default`` when unusable."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value

    raw_value = normalize_text(value)
    if not raw_value:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default

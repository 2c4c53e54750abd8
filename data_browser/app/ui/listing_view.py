from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

EMPTY_VALUE = "—"


@dataclass(frozen=True)
class ColumnDef:
    key: str
    label: str
    filterable: bool = False


def normalize_value(value: Any) -> str:
    if value is None:
        return EMPTY_VALUE
    if isinstance(value, str):
        clean = value.strip()
        return clean or EMPTY_VALUE
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, datetime):
        return value.astimezone().strftime("%Y-%m-%d %H:%M:%S %z")
    if isinstance(value, (list, tuple)):
        return ", ".join(normalize_value(item) for item in value) or EMPTY_VALUE
    return str(value)

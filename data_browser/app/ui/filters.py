from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from data_browser.app.ui.listing_view import ColumnDef

Record = Mapping[str, Any]
Matcher = Callable[[Record, str], bool]


def clean_filters(filters: Mapping[str, Any]) -> dict[str, str]:
    """Drop inactive filters so that only non-empty queries remain as keys."""
    cleaned: dict[str, str] = {}
    for key, value in filters.items():
        if value is None:
            continue
        text = str(value)
        if text:
            cleaned[key] = text
    return cleaned


def field_contains(record: Record, key: str, query: str) -> bool:
    try:
        value = record.get(key)
    except AttributeError:
        return False
    if value is None:
        return False
    return query.lower() in str(value).lower()


def key_matcher(key: str) -> Matcher:
    return lambda record, query: field_contains(record, key, query)


def any_field_matcher(*keys: str) -> Matcher:
    """Match when any of ``keys`` contains the query.

    Used for a single user-facing filter that covers several fields, e.g. a
    name filter on ``firstName`` that should also find ``lastName`` hits.
    """
    if not keys:
        raise ValueError("any_field_matcher needs at least one key")
    return lambda record, query: any(field_contains(record, key, query) for key in keys)


def filterable_keys(columns: Iterable[ColumnDef]) -> set[str]:
    return {column.key for column in columns if column.filterable}


def apply_filters(
    records: Sequence[Record],
    filters: Mapping[str, str],
    columns: Iterable[ColumnDef] | None = None,
    matchers: Mapping[str, Matcher] | None = None,
) -> list[Record]:
    active = clean_filters(filters)
    if columns is not None:
        allowed = filterable_keys(columns)
        active = {key: query for key, query in active.items() if key in allowed}
    if not active:
        return list(records)

    overrides = matchers or {}
    predicates = [(overrides.get(key) or key_matcher(key), query) for key, query in active.items()]
    return [record for record in records if all(_safe_match(match, record, query) for match, query in predicates)]


def _safe_match(match: Matcher, record: Record, query: str) -> bool:
    try:
        return bool(match(record, query))
    except (AttributeError, TypeError, ValueError, KeyError):
        return False

from __future__ import annotations

from typing import Any, TextIO

from data_browser.app.ui.listing_view import ColumnDef, normalize_value
from data_browser.app.ui.pagination import ELLIPSIS, PagerModel

LOADING_TEXT = "Loading..."
EMPTY_TEXT = "No data found"


def render_table(
    rows: list[dict[str, Any]],
    columns: list[ColumnDef],
    loading: bool = False,
    empty_text: str | None = None,
) -> list[str]:
    headers = [column.label.upper() for column in columns]
    if loading or not rows:
        placeholder = LOADING_TEXT if loading else (empty_text or EMPTY_TEXT)
        return [" | ".join(headers), placeholder]

    widths = []
    for column, header in zip(columns, headers):
        max_cell = max(len(normalize_value(row.get(column.key))) for row in rows)
        widths.append(max(len(header), max_cell))

    lines = [
        " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers)),
        "-+-".join("-" * width for width in widths),
    ]
    for row in rows:
        lines.append(
            " | ".join(normalize_value(row.get(column.key)).ljust(widths[idx]) for idx, column in enumerate(columns))
        )
    return lines


def render_pager(pager: PagerModel) -> str:
    parts = ["<" if pager.can_go_prev else " "]
    for token in pager.window:
        if token == ELLIPSIS:
            parts.append(ELLIPSIS)
        elif token == pager.current_page:
            parts.append(f"[{token}]")
        else:
            parts.append(str(token))
    parts.append(">" if pager.can_go_next else " ")
    return " ".join(parts).strip()


def print_table(
    title: str,
    rows: list[dict[str, Any]],
    columns: list[ColumnDef],
    pager: PagerModel | None = None,
    loading: bool = False,
    stream: TextIO | None = None,
    empty_text: str | None = None,
) -> None:
    lines = [f"\n{title}", *render_table(rows, columns, loading=loading, empty_text=empty_text)]
    if pager is not None:
        lines.append("")
        lines.append(render_pager(pager))
    print("\n".join(lines), file=stream)

from __future__ import annotations

import math
from dataclasses import dataclass

ELLIPSIS = "..."
FULL_WINDOW_MAX_PAGES = 7

PageToken = int | str


@dataclass(frozen=True)
class PagerModel:
    current_page: int
    total_pages: int
    window: tuple[PageToken, ...]
    can_go_prev: bool
    can_go_next: bool


def total_pages(total: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return max(1, math.ceil(max(0, total) / page_size))


def clamp_page(page: int, pages: int) -> int:
    return min(max(1, page), max(1, pages))


def compute_page_window(current_page: int, total_pages: int) -> list[PageToken]:
    """Page numbers and ellipsis markers to show for ``current_page``.

    Up to seven pages are listed in full. Past that the first and last pages
    are always shown around a block of two neighbours on each side of the
    current page, with ``ELLIPSIS`` standing in for the gaps.
    """
    pages = max(1, total_pages)
    current = clamp_page(current_page, pages)
    if pages <= FULL_WINDOW_MAX_PAGES:
        return list(range(1, pages + 1))

    window: list[PageToken] = [1]
    if current > 4:
        window.append(ELLIPSIS)
    start = max(2, current - 2)
    end = min(pages - 1, current + 2)
    window.extend(range(start, end + 1))
    # trailing threshold is pages - 3, not the mirror of the leading "> 4"
    if current < pages - 3:
        window.append(ELLIPSIS)
    window.append(pages)
    return window


def can_go_prev(current_page: int, total_pages: int) -> bool:
    return clamp_page(current_page, total_pages) > 1


def can_go_next(current_page: int, total_pages: int) -> bool:
    return clamp_page(current_page, total_pages) < max(1, total_pages)


def prev_page(current_page: int, total_pages: int) -> int:
    current = clamp_page(current_page, total_pages)
    return current - 1 if can_go_prev(current, total_pages) else current


def next_page(current_page: int, total_pages: int) -> int:
    current = clamp_page(current_page, total_pages)
    return current + 1 if can_go_next(current, total_pages) else current


def build_pager(current_page: int, total_pages: int) -> PagerModel:
    pages = max(1, total_pages)
    current = clamp_page(current_page, pages)
    return PagerModel(
        current_page=current,
        total_pages=pages,
        window=tuple(compute_page_window(current, pages)),
        can_go_prev=can_go_prev(current, pages),
        can_go_next=can_go_next(current, pages),
    )

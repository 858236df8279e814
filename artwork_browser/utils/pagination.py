"""Pagination helpers for remote page arithmetic."""

from __future__ import annotations

import math


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Compute the total number of pages for the provided page size."""
    if page_size <= 0:
        return 1
    return max(1, math.ceil(total_rows / page_size))


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Clamp page number to valid bounds."""
    return min(max(page_number, 1), max(total_pages, 1))


def page_from_offset(first_row_offset: int, page_size: int) -> int:
    """Convert a zero-based first-row offset into a 1-based page index."""
    if first_row_offset < 0:
        raise ValueError(f"first_row_offset must be >= 0, got {first_row_offset}")
    if page_size <= 0:
        raise ValueError(f"page_size must be > 0, got {page_size}")
    return first_row_offset // page_size + 1


def first_row_offset(page_number: int, page_size: int) -> int:
    """Return the zero-based offset of the first row on a page."""
    return (max(page_number, 1) - 1) * page_size


def pages_needed(target_count: int, page_size: int) -> int:
    """Return how many pages must be fetched to cover ``target_count`` rows."""
    if target_count <= 0:
        return 0
    return math.ceil(target_count / page_size)

"""
Pagination utilities for record listings.

Listings are plain lists re-read from the store, so pagination is a slice
plus the total count taken before slicing.
"""

from typing import Any, List, Sequence, Tuple


def paginate_items(
    items: Sequence[Any],
    page: int = 1,
    page_size: int = 25,
) -> Tuple[List[Any], int]:
    """
    Apply offset-based pagination to an already filtered sequence.

    Args:
        items: Filtered records in listing order
        page: Page number (1-indexed, default 1)
        page_size: Items per page (default 25)

    Returns:
        Tuple of (page_items, total_count)
    """
    total = len(items)
    offset = (max(page, 1) - 1) * page_size
    return list(items[offset:offset + page_size]), total


def build_paginated_response(
    items: List[dict],
    total: int,
    page: int,
    page_size: int,
) -> dict:
    """
    Build a standardized paginated response dictionary.

    Returns:
        Dict with keys: items, total, page, page_size, total_pages, has_more
    """
    total_pages = -(-total // page_size) if total > 0 else 0

    return {
        "items": items,
        "total": total,
        "page": page,
        "page_size": page_size,
        "total_pages": total_pages,
        "has_more": page < total_pages,
    }

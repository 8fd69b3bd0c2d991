"""
Slang Translator Backend — Browse Engine
==========================================

What:  Alphabetical sorting and offset pagination over the record set.
Who:   Called per request by SlangCatalog.browse() and count().

Pagination rules:
    - page and limit are floored and clamped to at least 1
    - +infinity means "unbounded": the last page, or everything on one page
    - total_pages = ceil(total_items / limit), in integer arithmetic
    - a page past the end clamps to the last page (no error)
    - an empty record set gives page 1, total_pages 0, no items

Sort order:
    Case-insensitive and accent-insensitive first: the casefolded term is
    NFKD-decomposed and stripped of combining marks, so "élite" files
    under "e" even in the default C locale. The casefolded term with its
    accents breaks ties. Both keys go through locale.strxfrm, so an
    explicit setlocale(LC_COLLATE) refines the order further.
    sorted() is stable, so equal keys keep their record-set order.
"""

import locale
import math
import unicodedata
from typing import Any, List, Optional, Tuple

from slang_translator.schemas.slang import BrowseResult, SlangRecord
from slang_translator.services.search_engine import is_record_sequence


def _sort_key(record: SlangRecord) -> Tuple[str, str]:
    folded = record.term.casefold()
    base = "".join(
        char
        for char in unicodedata.normalize("NFKD", folded)
        if not unicodedata.combining(char)
    )
    return locale.strxfrm(base), locale.strxfrm(folded)


def _positive_int(value: Any) -> Optional[int]:
    """Floors and clamps to >= 1; returns None for +infinity (unbounded)."""
    try:
        return max(1, math.floor(value))
    except OverflowError:
        return None if value > 0 else 1
    except (TypeError, ValueError):
        return 1


def sort_alphabetical(records: Any) -> List[SlangRecord]:
    """Returns a new list sorted by term; the input is left untouched."""
    if not is_record_sequence(records):
        return []
    return sorted(records, key=_sort_key)


def count(records: Any) -> int:
    """Number of records, or 0 when `records` is not a sequence."""
    if not is_record_sequence(records):
        return 0
    return len(records)


def paginate(records: Any, page: Any = 1, limit: Any = 10) -> BrowseResult:
    """
    Return one page of the alphabetically sorted record set.

    Args:
        records: The record set.
        page: Requested 1-based page number.
        limit: Items per page.

    Returns:
        BrowseResult carrying the effective page, the clamped limit and totals.
    """
    if not is_record_sequence(records):
        return BrowseResult(page=1, limit=limit, total_items=0, total_pages=0, items=[])

    ordered = sort_alphabetical(records)
    total_items = len(ordered)

    page_size = _positive_int(limit)
    if page_size is None:
        page_size = max(1, total_items)

    total_pages = -(-total_items // page_size)
    last_page = max(1, total_pages)

    requested_page = _positive_int(page)
    current_page = last_page if requested_page is None else min(requested_page, last_page)

    start = (current_page - 1) * page_size
    return BrowseResult(
        page=current_page,
        limit=page_size,
        total_items=total_items,
        total_pages=total_pages,
        items=ordered[start:start + page_size],
    )

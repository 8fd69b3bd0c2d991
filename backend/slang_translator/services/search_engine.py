"""
Slang Translator Backend — Search Engine
==========================================

What:  Ranks records against a free-text query.
How:   Two tiers, no scoring:
       1. Exact match: lowercase term equals the whole normalized query
       2. Partial match: lowercase term or definition contains ANY query word
       Exact matches come first; each tier keeps record-set order.
Who:   Called per request by SlangCatalog.search().

Malformed input (non-string query, blank query, record set that is not a
sequence) returns an empty SearchResult rather than raising.
"""

import time
from collections.abc import Sequence
from typing import Any, List

from slang_translator.schemas.slang import SearchResult, SlangRecord


def _elapsed_ms(start: float) -> float:
    return max(0.0, (time.perf_counter() - start) * 1000)


def is_record_sequence(records: Any) -> bool:
    """True for list/tuple-like record sets; strings and bytes do not count."""
    return isinstance(records, Sequence) and not isinstance(records, (str, bytes))


def search(query: Any, records: Any) -> SearchResult:
    """
    Case-insensitive search over term and definition.

    Args:
        query: Free text as typed by the user.
        records: The record set to scan.

    Returns:
        SearchResult with exact matches before partial matches.
    """
    start = time.perf_counter()

    if not isinstance(query, str) or not is_record_sequence(records):
        return SearchResult(execution_time=_elapsed_ms(start))

    normalized = query.lower().strip()
    if not normalized:
        return SearchResult(execution_time=_elapsed_ms(start))

    words = normalized.split()
    exact_matches: List[SlangRecord] = []
    partial_matches: List[SlangRecord] = []

    for record in records:
        term = record.term.lower()
        definition = record.definition.lower()

        if term == normalized:
            exact_matches.append(record)
        elif any(word in term or word in definition for word in words):
            partial_matches.append(record)

    results = exact_matches + partial_matches
    return SearchResult(
        results=results,
        total_results=len(results),
        execution_time=_elapsed_ms(start),
    )

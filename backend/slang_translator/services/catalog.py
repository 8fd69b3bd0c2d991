"""
Slang Translator Backend — Slang Catalog (Read-Only Context Object)
=====================================================================

What:  Holds the ingested record set and answers search, browse and
       term-lookup requests against it.
Why:   The record set is built once at startup and never changes. Wrapping
       it in an explicitly constructed object (instead of a module-level
       global) lets the app factory own its lifetime and lets tests pass
       fixture catalogs directly.
How:   Records are stored as a tuple together with an id → record index.
       Query methods delegate to the pure search/browse engines.
Who:   Created in the FastAPI lifespan (or by tests); reached by routes via
       the `get_catalog` dependency.

Concurrency:
    Nothing on a catalog is mutable after construction, so concurrent
    requests can share one instance. Each engine call builds its own
    result lists.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, Union

from slang_translator.exceptions import NotFoundError
from slang_translator.schemas.slang import (
    BrowseResult,
    IngestResult,
    SearchResult,
    SlangRecord,
)
from slang_translator.services import browse_engine, search_engine
from slang_translator.services.ingestor import ingest_file, parse_markdown

logger = logging.getLogger(__name__)


class SlangCatalog:
    """
    Immutable in-memory slang catalog.

    Attributes:
        records:     Accepted records in document order.
        load_errors: Ingestion error strings (rejected terms, read failure).
    """

    __slots__ = ("_records", "_load_errors", "_by_id")

    def __init__(
        self,
        records: Iterable[SlangRecord] = (),
        load_errors: Iterable[str] = (),
    ):
        self._records: Tuple[SlangRecord, ...] = tuple(records)
        self._load_errors: Tuple[str, ...] = tuple(load_errors)
        # First record wins if an id were ever duplicated, matching a linear scan
        by_id = {}
        for record in self._records:
            by_id.setdefault(record.id, record)
        self._by_id: Mapping[str, SlangRecord] = MappingProxyType(by_id)

    # ── Construction ──────────────────────────────────────────────────────

    @classmethod
    def from_ingest_result(cls, result: IngestResult) -> "SlangCatalog":
        return cls(records=result.records, load_errors=result.errors)

    @classmethod
    def from_markdown(cls, text: str) -> "SlangCatalog":
        """Builds a catalog from document text (used by tests and tooling)."""
        return cls.from_ingest_result(parse_markdown(text))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SlangCatalog":
        """
        Builds a catalog from the source document at `path`.

        Never raises: an unreadable file gives an empty catalog whose
        load_errors explains why.
        """
        catalog = cls.from_ingest_result(ingest_file(path))
        for error in catalog.load_errors:
            logger.warning("Catalog load warning: %s", error)
        return catalog

    # ── Read-only views ───────────────────────────────────────────────────

    @property
    def records(self) -> Tuple[SlangRecord, ...]:
        return self._records

    @property
    def load_errors(self) -> Tuple[str, ...]:
        return self._load_errors

    def __len__(self) -> int:
        return len(self._records)

    # ── Queries ───────────────────────────────────────────────────────────

    def search(self, query: str) -> SearchResult:
        return search_engine.search(query, self._records)

    def browse(self, page: int = 1, limit: int = 10) -> BrowseResult:
        return browse_engine.paginate(self._records, page, limit)

    def count(self) -> int:
        return browse_engine.count(self._records)

    def find_term(self, term_id: str) -> Optional[SlangRecord]:
        """Returns the record with this id, or None."""
        return self._by_id.get(term_id)

    def get_term(self, term_id: str) -> SlangRecord:
        """
        Returns the record with this id.

        Raises:
            NotFoundError: no record carries `term_id` (→ 404 at the boundary)
        """
        record = self.find_term(term_id)
        if record is None:
            raise NotFoundError(resource="term", resource_id=term_id)
        return record

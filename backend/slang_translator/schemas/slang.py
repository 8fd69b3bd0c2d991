"""
Slang Translator Backend — Pydantic Record and Result Schemas
==============================================================

What:  Pydantic models for slang records and for every result envelope the
       engines and the API return.
Why:   One set of models serves the in-memory record set, the engine results
       and the OpenAPI contract, so the shapes cannot drift apart.
How:   Python attributes are snake_case; dict/JSON form is camelCase via an
       alias generator. FastAPI serializes response models by alias, so the
       wire format matches the record format of the source document.
When:  Records are constructed once at ingestion; result envelopes per call.

Design Decision:
    Records are frozen. The catalog is built at startup and must stay
    read-only for the process lifetime; assignment to a frozen model raises
    instead of silently mutating shared state.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase aliases while accepting snake_case names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(frozen=True)


# ══════════════════════════════════════════════════════════════════════════
# Record Models — What the ingestor produces
# ══════════════════════════════════════════════════════════════════════════


class UsageExample(FrozenCamelModel):
    """One example sentence showing the term in use."""

    example: str = Field(description="Example sentence")
    context: Optional[str] = Field(default=None, description="Where the example applies")


class CulturalContext(FrozenCamelModel):
    """
    Who uses a term and where.

    Examples of values:
        age_group:          "teens", "young adults", "all ages"
        social_setting:     "casual", "formal", "street"
        region_specificity: "city-wide", "neighborhood", "specific group"
    """

    age_group: str
    social_setting: str
    region_specificity: str
    additional_notes: Optional[str] = None


class SlangRecord(FrozenCamelModel):
    """
    What:  One slang-term entry with definition, examples and cultural context.
    Who:   Held by SlangCatalog; returned by search, browse and term lookup.

    Invariants (guaranteed by the ingestor, which validates before constructing):
        - id is `term-<n>` and never changes
        - usage_examples is never empty
    """

    id: str = Field(description="Sequential identifier such as 'term-1'")
    term: str = Field(description="The slang term itself")
    definition: str = Field(description="Formal meaning")
    formal_translation: Optional[str] = Field(
        default=None, description="Standard language equivalent"
    )
    usage_examples: List[UsageExample] = Field(description="At least one usage example")
    cultural_context: CulturalContext
    created_at: Optional[str] = Field(default=None, description="ISO 8601 timestamp")
    updated_at: Optional[str] = Field(default=None, description="ISO 8601 timestamp")


# ══════════════════════════════════════════════════════════════════════════
# Result Envelopes — What the validator, ingestor and engines return
# ══════════════════════════════════════════════════════════════════════════


class ValidationResult(CamelModel):
    """Outcome of validating one candidate; errors are ordered by rule."""

    is_valid: bool
    errors: List[str] = Field(default_factory=list)


class IngestResult(CamelModel):
    """Accepted records in document order plus one error string per rejection."""

    records: List[SlangRecord] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)


class SearchResult(CamelModel):
    """
    Ranked search output.

    Ordering: exact term matches first, then partial matches, each group in
    record-set order. execution_time is observational only (milliseconds).
    """

    results: List[SlangRecord] = Field(default_factory=list)
    total_results: int = Field(default=0, ge=0)
    execution_time: float = Field(default=0.0, ge=0, description="Milliseconds")


class BrowseResult(CamelModel):
    """
    One page of the alphabetically sorted record set.

    `limit` is echoed back unchanged when the record set itself was invalid,
    so it is typed loosely here.
    """

    page: int = Field(default=1, description="Effective (clamped) page number")
    limit: Any = Field(default=10, description="Items per page after clamping")
    total_items: int = Field(default=0, ge=0)
    total_pages: int = Field(default=0, ge=0)
    items: List[SlangRecord] = Field(default_factory=list)


# ══════════════════════════════════════════════════════════════════════════
# API Models — Response bodies that only exist at the HTTP boundary
# ══════════════════════════════════════════════════════════════════════════


class SearchResponse(SearchResult):
    """SearchResult plus the query string exactly as the client sent it."""

    query: str


class ErrorResponse(CamelModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "term with ID 'term-99' was not found",
            "requestId": "a1b2c3d4"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(CamelModel):
    """
    Health check response.

    status is "degraded" when ingestion reported errors or loaded no terms;
    the service still answers requests in that state.
    """

    status: str = Field(description="Overall service status: healthy, degraded")
    version: str = Field(description="Application version")
    terms_loaded: int = Field(description="Records in the in-memory catalog")
    load_errors: int = Field(description="Ingestion error strings collected at startup")
    uptime_seconds: float = Field(description="Seconds since service started")

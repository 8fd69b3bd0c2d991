"""
Slang Translator Backend — Slang Route Handlers
=================================================

What:  Handles GET /api/search, GET /api/browse and GET /api/term/{term_id}.
How:   Validates request parameters, delegates to the SlangCatalog, returns
       camelCase JSON through the response models.
Who:   Called by the browser frontend's search box, browse list and detail view.

Input validation lives HERE, not in the engines:
    - Blank `q` → ValidationError (400)
    - `limit` above settings.max_page_limit is clamped to it
    - Non-integer or < 1 `page`/`limit` → FastAPI request validation,
      converted to the same 400 envelope by the handler in main.py
    The engines themselves degrade gracefully and never raise.

Caching Strategy:
    The catalog is immutable for the process lifetime, so term details can
    be cached by clients; search and browse results are cheap to recompute.
"""

import logging

from fastapi import APIRouter, Depends, Query, Response

from slang_translator.config import settings
from slang_translator.dependencies import get_catalog
from slang_translator.exceptions import ValidationError
from slang_translator.schemas.slang import (
    BrowseResult,
    ErrorResponse,
    SearchResponse,
    SlangRecord,
)
from slang_translator.services.catalog import SlangCatalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Slang"])


@router.get(
    "/search",
    response_model=SearchResponse,
    responses={
        200: {"description": "Ranked matches", "model": SearchResponse},
        400: {"description": "Blank query", "model": ErrorResponse},
    },
    summary="Search slang terms",
    description=(
        "Case-insensitive search over term names and definitions. Records whose "
        "term equals the query come first, followed by records whose term or "
        "definition contains any query word."
    ),
)
async def search_terms(
    q: str = Query(default="", description="Free-text search query"),
    catalog: SlangCatalog = Depends(get_catalog),
) -> SearchResponse:
    if not q.strip():
        raise ValidationError(message="Please enter a search term", field="q")

    result = catalog.search(q)
    logger.debug("Search %r matched %d terms", q, result.total_results)

    return SearchResponse(
        query=q,
        results=result.results,
        total_results=result.total_results,
        execution_time=result.execution_time,
    )


@router.get(
    "/browse",
    response_model=BrowseResult,
    responses={
        200: {"description": "One page of terms in alphabetical order", "model": BrowseResult},
        400: {"description": "Invalid page or limit", "model": ErrorResponse},
    },
    summary="Browse all terms alphabetically",
    description=(
        "Returns one page of the alphabetically sorted catalog. A page past the end "
        "returns the last page. A limit above the server maximum is lowered to it. "
        "The total number of terms is also sent in the X-Total-Count header."
    ),
)
async def browse_terms(
    response: Response,
    page: int = Query(default=1, ge=1, description="1-based page number"),
    limit: int | None = Query(
        default=None, ge=1, description="Items per page (defaults to the server setting)"
    ),
    catalog: SlangCatalog = Depends(get_catalog),
) -> BrowseResult:
    page_size = limit if limit is not None else settings.default_page_limit
    page_size = min(page_size, settings.max_page_limit)

    result = catalog.browse(page=page, limit=page_size)
    response.headers["X-Total-Count"] = str(result.total_items)
    return result


@router.get(
    "/term/{term_id}",
    response_model=SlangRecord,
    response_model_exclude_none=True,
    responses={
        200: {"description": "Full term details", "model": SlangRecord},
        404: {"description": "Term not found", "model": ErrorResponse},
    },
    summary="Get a single term by ID",
)
async def get_term(
    term_id: str,
    response: Response,
    catalog: SlangCatalog = Depends(get_catalog),
) -> SlangRecord:
    """
    Get full details of a single term.

    Raises NotFoundError (→ 404) for unknown ids. Ids are only assigned at
    startup, so a found record never changes while the process runs.
    """
    record = catalog.get_term(term_id)
    response.headers["Cache-Control"] = "public, max-age=3600"
    return record

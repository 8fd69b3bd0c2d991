"""
Slang Translator Backend — Health Check Route
===============================================

What:  Health check endpoint for monitoring and container probes.
How:   Reports how many terms the catalog holds and how many ingestion
       errors were collected at startup.

Status levels:
    - healthy:  catalog loaded with no ingestion errors
    - degraded: some terms were rejected, or the catalog is empty
                (e.g. the source document could not be read)
    Both return HTTP 200: the process can still answer requests.
"""

import logging
import time

from fastapi import APIRouter, Depends

from slang_translator import __version__
from slang_translator.dependencies import get_catalog
from slang_translator.schemas.slang import HealthResponse
from slang_translator.services.catalog import SlangCatalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(catalog: SlangCatalog = Depends(get_catalog)) -> HealthResponse:
    terms_loaded = catalog.count()
    load_errors = len(catalog.load_errors)

    overall = "healthy"
    if load_errors or terms_loaded == 0:
        overall = "degraded"

    return HealthResponse(
        status=overall,
        version=__version__,
        terms_loaded=terms_loaded,
        load_errors=load_errors,
        uptime_seconds=round(time.time() - _start_time, 2),
    )

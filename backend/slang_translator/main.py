"""
Slang Translator Backend — FastAPI Application Factory
========================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes logging setup, catalog loading, middleware registration,
       route mounting and error handling in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn slang_translator.main:app) and by tests.

Lifecycle:
    Startup:
    1. Initialize logging
    2. Ingest the source document into a SlangCatalog (unless one was injected)
    3. Log how many terms loaded and how many were rejected

    The catalog is never reloaded; a restart picks up document edits.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from slang_translator import __version__
from slang_translator.config import settings
from slang_translator.exceptions import NotFoundError, SlangTranslatorError, ValidationError
from slang_translator.middleware.logging import RequestLoggingMiddleware
from slang_translator.middleware.request_id import RequestIDMiddleware, request_id_var
from slang_translator.routes import health, slang
from slang_translator.services.catalog import SlangCatalog

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before the catalog is loaded, so ingestion
    warnings about rejected terms are visible.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Load the catalog on startup.

    An unreadable source document does not stop the server: the catalog is
    empty, /api/health reports "degraded", and the read error is logged.
    """
    setup_logging()
    logger.info("Slang Translator Backend starting up...")

    if getattr(app.state, "catalog", None) is None:
        app.state.catalog = SlangCatalog.from_file(settings.data_path)

    catalog: SlangCatalog = app.state.catalog
    logger.info(
        "Catalog ready: %d terms, %d load errors",
        len(catalog),
        len(catalog.load_errors),
    )
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Slang Translator Backend shutting down...")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, message: str, details: Optional[dict] = None) -> dict:
    body = {"error": error, "message": message, "requestId": request_id_var.get("")}
    if details:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the ErrorResponse envelope.

    Handler hierarchy:
        ValidationError              → 400 Bad Request
        RequestValidationError       → 400 Bad Request (bad page/limit types or ranges)
        NotFoundError                → 404 Not Found
        SlangTranslatorError (base)  → 500 Internal Server Error
        Exception (fallback)         → 500 Internal Server Error

    Internal details (stack traces, file paths) are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", exc.message, exc.context),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        fields = [".".join(str(part) for part in err.get("loc", ())[1:]) for err in exc.errors()]
        logger.warning("[%s] Invalid request parameters: %s", request_id_var.get(""), fields)
        return JSONResponse(
            status_code=400,
            content=_error_body(
                "validation_error",
                "Invalid request parameters",
                {"fields": [field for field in fields if field]},
            ),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content=_error_body("not_found", exc.message),
        )

    @app.exception_handler(SlangTranslatorError)
    async def handle_app_error(request: Request, exc: SlangTranslatorError):
        logger.error(
            "[%s] Application error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", "An internal error occurred. Please try again later."),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "internal_server_error",
                "An unexpected error occurred. Please try again or contact support.",
            ),
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(catalog: Optional[SlangCatalog] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        catalog: Pre-built catalog to serve. When omitted, the lifespan
                 ingests `settings.data_path` at startup.

    Returns:
        Fully configured FastAPI instance.
    """
    app = FastAPI(
        title="Slang Translator API",
        description=(
            "Search, browse and look up slang terms with definitions, usage "
            "examples and cultural context."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.catalog = catalog

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Total-Count"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(slang.router)
    app.include_router(health.router)

    return app


# uvicorn expects `slang_translator.main:app` to be importable
app = create_app()

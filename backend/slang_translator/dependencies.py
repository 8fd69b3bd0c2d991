"""
Slang Translator Backend — Request Dependencies
=================================================

What:  FastAPI dependencies shared by the route modules.
Why:   Routes must not reach for a global record set. The catalog lives on
       `app.state`, set by the lifespan at startup (or by create_app() when a
       catalog is passed in, as tests do).
"""

from fastapi import Request

from slang_translator.exceptions import SlangTranslatorError
from slang_translator.services.catalog import SlangCatalog


def get_catalog(request: Request) -> SlangCatalog:
    """
    FastAPI dependency returning the catalog for the running app.

    Example usage in a route:
        @router.get("/api/browse")
        async def browse(catalog: SlangCatalog = Depends(get_catalog)):
            return catalog.browse()

    Raises:
        SlangTranslatorError: The app was never started (no lifespan ran and
            no catalog was injected). Mapped to a 500 by the app's handlers.
    """
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise SlangTranslatorError(message="Slang catalog is not loaded")
    return catalog

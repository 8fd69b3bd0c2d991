"""
Slang Translator Backend — Application Package Initializer
===========================================================

What: Marks the `slang_translator` directory as a Python package.
Why:  Enables module imports like `from slang_translator.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    This backend follows a layered architecture over an in-memory record set:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      SlangCatalog (Context Object)  │  ← Immutable record set + id index
    ├─────────────────────────────────────┤
    │  Search / Browse Engines (Queries)  │  ← Pure functions over records
    ├─────────────────────────────────────┤
    │  Ingestor + Validator (Startup)     │  ← Markdown → validated records
    └─────────────────────────────────────┘

    - Routes handle HTTP details (status codes, headers) but delegate to the catalog
    - Engines never raise; they return structured results, including the empty case
    - The ingestor runs once at startup; nothing mutates the record set afterwards
"""

__version__ = "1.0.0"

# Services package init
"""
Slang Translator Backend — Services Layer
===========================================

What:  Ingestion, validation and query logic, independent of HTTP.

Service Inventory:
    - validator:      Field-presence and type rules for candidate records
    - ingestor:       Markdown document → validated SlangRecord list
    - search_engine:  Exact/partial tiered search
    - browse_engine:  Alphabetical sort, pagination, count
    - catalog:        SlangCatalog, the immutable context object routes query

Everything here except the document read is a pure function of its inputs.
"""

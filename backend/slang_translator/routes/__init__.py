# Routes package init
"""
Slang Translator Backend — API Routes Package
===============================================

Route Inventory:
    - slang.py:   GET /api/search            (ranked search)
                  GET /api/browse            (alphabetical pagination)
                  GET /api/term/{term_id}    (single term detail)
    - health.py:  GET /api/health            (service health check)

Design Principle:
    Routes are THIN. They validate request parameters, call the catalog,
    and set status codes and headers. Ranking and pagination rules live
    in the services package.
"""

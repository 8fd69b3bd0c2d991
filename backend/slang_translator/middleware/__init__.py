# Middleware package init
"""
Slang Translator Backend — Middleware Package
===============================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first, so the access log line and any error body share it
    2. Logging measures the full handler duration
    3. CORS is FastAPI's CORSMiddleware (handles preflight OPTIONS)
"""

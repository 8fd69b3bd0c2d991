"""
Slang Translator Backend — HTTP API Tests
===========================================

What:  Endpoint tests through HTTPX AsyncClient over ASGITransport.
How:   The `test_client` fixture serves the five-term `catalog` fixture;
       no server process and no source document are involved.

What we test:
    ✅ Search ranking, camelCase payload, blank query → 400
    ✅ Browse pagination, defaults, X-Total-Count, oversized limit clamped, bad parameters → 400
    ✅ Term detail and 404
    ✅ Health status, request id propagation, unloaded catalog → 500
"""

import pytest
from httpx import ASGITransport, AsyncClient

from slang_translator.main import create_app
from slang_translator.services.catalog import SlangCatalog


class TestSearchEndpoint:

    @pytest.mark.asyncio
    async def test_search_returns_ranked_results(self, test_client):
        response = await test_client.get("/api/search", params={"q": "Lit"})

        assert response.status_code == 200
        body = response.json()
        assert body["query"] == "Lit"
        assert body["totalResults"] == 1
        assert body["results"][0]["id"] == "term-1"
        assert body["results"][0]["usageExamples"][0]["example"] == "Example using lit"
        assert body["results"][0]["culturalContext"]["ageGroup"] == "teens"
        assert body["executionTime"] >= 0

    @pytest.mark.asyncio
    async def test_search_without_matches(self, test_client):
        response = await test_client.get("/api/search", params={"q": "zzz"})
        assert response.status_code == 200
        assert response.json()["results"] == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
    async def test_blank_query_is_rejected(self, test_client, params):
        response = await test_client.get("/api/search", params=params)

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["message"] == "Please enter a search term"
        assert body["details"] == {"field": "q"}


class TestBrowseEndpoint:

    @pytest.mark.asyncio
    async def test_browse_page(self, test_client):
        response = await test_client.get("/api/browse", params={"page": 1, "limit": 2})

        assert response.status_code == 200
        body = response.json()
        assert [item["term"] for item in body["items"]] == ["based", "flex"]
        assert body["page"] == 1
        assert body["limit"] == 2
        assert body["totalItems"] == 5
        assert body["totalPages"] == 3
        assert response.headers["X-Total-Count"] == "5"

    @pytest.mark.asyncio
    async def test_browse_defaults(self, test_client):
        body = (await test_client.get("/api/browse")).json()
        assert body["page"] == 1
        assert body["limit"] == 10
        assert len(body["items"]) == 5

    @pytest.mark.asyncio
    async def test_browse_page_past_end_clamps(self, test_client):
        body = (await test_client.get("/api/browse", params={"page": 50, "limit": 2})).json()
        assert body["page"] == 3
        assert [item["term"] for item in body["items"]] == ["vibe"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "params",
        [{"page": 0}, {"limit": 0}, {"page": "abc"}, {"limit": "1.5"}, {"page": -1}],
    )
    async def test_invalid_parameters_are_rejected(self, test_client, params):
        response = await test_client.get("/api/browse", params=params)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_limit_above_maximum_is_clamped(self, test_client):
        response = await test_client.get("/api/browse", params={"limit": 1000})

        assert response.status_code == 200
        body = response.json()
        assert body["limit"] == 100
        assert body["totalPages"] == 1
        assert len(body["items"]) == 5


class TestTermEndpoint:

    @pytest.mark.asyncio
    async def test_get_term(self, test_client):
        response = await test_client.get("/api/term/term-3")

        assert response.status_code == 200
        body = response.json()
        assert body["term"] == "flex"
        assert body["definition"] == "To show off"
        assert "formalTranslation" not in body

    @pytest.mark.asyncio
    async def test_unknown_term_is_404(self, test_client):
        response = await test_client.get("/api/term/term-99")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert "term-99" in body["message"]


class TestHealthAndHeaders:

    @pytest.mark.asyncio
    async def test_health_healthy(self, test_client):
        response = await test_client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["termsLoaded"] == 5
        assert body["loadErrors"] == 0

    @pytest.mark.asyncio
    async def test_health_degraded_with_load_errors(self, tmp_path):
        catalog = SlangCatalog.from_file(tmp_path / "missing.md")
        app = create_app(catalog=catalog)
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            body = (await client.get("/api/health")).json()

        assert body["status"] == "degraded"
        assert body["termsLoaded"] == 0
        assert body["loadErrors"] == 1

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/api/term/term-1", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_request_id_is_generated(self, test_client):
        response = await test_client.get("/api/term/term-99")
        rid = response.headers["X-Request-ID"]
        assert rid
        assert response.json()["requestId"] == rid

    @pytest.mark.asyncio
    async def test_unstarted_app_reports_missing_catalog(self):
        app = create_app()
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/api/browse")

        assert response.status_code == 500
        assert response.json()["error"] == "server_error"
        assert app.state.catalog is None

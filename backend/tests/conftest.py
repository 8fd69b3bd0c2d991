"""
Slang Translator Backend — Test Configuration (conftest.py)
=============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Inventory:
    make_record:      Factory building valid SlangRecord objects
    sample_records:   The five-term record set used by the browse scenarios
    valid_candidate:  A dict candidate that passes every validator rule
    sample_markdown:  A two-term markdown document
    markdown_file:    sample_markdown written to a temp file
    catalog:          SlangCatalog over sample_records
    test_client:      HTTPX AsyncClient bound to an app serving `catalog`
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DATA_PATH"] = "does-not-exist/slang.md"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from slang_translator.schemas.slang import CulturalContext, SlangRecord, UsageExample
from slang_translator.services.catalog import SlangCatalog


@pytest.fixture
def make_record():
    """
    Factory for valid records.

    Usage:
        def test_x(make_record):
            record = make_record("lit", definition="Exciting", id="term-7")
    """

    def _make(term: str, definition: str = "", id: str = "", **overrides) -> SlangRecord:
        fields = {
            "id": id or f"term-{term}",
            "term": term,
            "definition": definition or f"Meaning of {term}",
            "usage_examples": [UsageExample(example=f"Example using {term}", context="")],
            "cultural_context": CulturalContext(
                age_group="teens",
                social_setting="casual",
                region_specificity="city-wide",
            ),
        }
        fields.update(overrides)
        return SlangRecord(**fields)

    return _make


@pytest.fixture
def sample_records(make_record):
    """lit, salty, flex, vibe, based: deliberately not in alphabetical order."""
    return [
        make_record("lit", "Exciting or excellent", id="term-1"),
        make_record("salty", "Bitter or upset", id="term-2"),
        make_record("flex", "To show off", id="term-3"),
        make_record("vibe", "Atmosphere or feeling", id="term-4"),
        make_record("based", "Being yourself", id="term-5"),
    ]


@pytest.fixture
def valid_candidate():
    """A dict candidate in the camelCase record format that passes validation."""
    return {
        "id": "term-1",
        "term": "lit",
        "definition": "Exciting or excellent",
        "formalTranslation": "Amazing",
        "usageExamples": [{"example": "That party was lit!", "context": ""}],
        "culturalContext": {
            "ageGroup": "teens",
            "socialSetting": "casual",
            "regionSpecificity": "city-wide",
            "additionalNotes": "Popular in urban areas",
        },
    }


@pytest.fixture
def sample_markdown():
    return """## lit
Definition: Exciting or excellent
Formal Translation: Amazing
Usage Examples:
- That party was lit!
- Your outfit is lit!
Cultural Context:
- Age Group: teens
- Social Setting: casual
- Region Specificity: city-wide
- Additional Notes: Popular in urban areas

## salty
Definition: Bitter or upset
Usage Examples:
- Don't be salty
Cultural Context:
- Age Group: young adults
- Social Setting: casual
- Region Specificity: city-wide
"""


@pytest.fixture
def markdown_file(tmp_path, sample_markdown):
    path = tmp_path / "slang.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path


@pytest.fixture
def catalog(sample_records):
    return SlangCatalog(records=sample_records)


@pytest_asyncio.fixture
async def test_client(catalog):
    """
    Async HTTP client talking to an app that serves the `catalog` fixture.

    ASGITransport does not run the lifespan, so the source document is never
    read; the injected catalog is what every route sees.
    """
    from slang_translator.main import create_app

    app = create_app(catalog=catalog)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

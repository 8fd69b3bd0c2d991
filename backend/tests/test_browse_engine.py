"""
Slang Translator Backend — Browse Engine Unit Tests
=====================================================

What we test:
    ✅ Alphabetical, case- and accent-insensitive, stable sort without mutating input
    ✅ Page slicing and total page computation
    ✅ Clamping of page and limit (low, high, fractional, infinite, unusable)
    ✅ Concatenating every page reproduces the sorted set
    ✅ Count helper and non-sequence input
"""

import math

import pytest

from slang_translator.services.browse_engine import count, paginate, sort_alphabetical


def _terms(records):
    return [record.term for record in records]


class TestSortAlphabetical:

    def test_sorts_by_term(self, sample_records):
        assert _terms(sort_alphabetical(sample_records)) == [
            "based",
            "flex",
            "lit",
            "salty",
            "vibe",
        ]

    def test_does_not_mutate_input(self, sample_records):
        before = list(sample_records)
        sort_alphabetical(sample_records)
        assert sample_records == before

    def test_case_insensitive(self, make_record):
        records = [make_record("Zoom"), make_record("apple"), make_record("Mango")]
        assert _terms(sort_alphabetical(records)) == ["apple", "Mango", "Zoom"]

    def test_accented_terms_file_under_base_letter(self, make_record):
        records = [make_record("zebra"), make_record("élite"), make_record("apple")]
        assert _terms(sort_alphabetical(records)) == ["apple", "élite", "zebra"]

    def test_unaccented_form_sorts_before_accented(self, make_record):
        records = [make_record("Café"), make_record("cafe"), make_record("cab")]
        assert _terms(sort_alphabetical(records)) == ["cab", "cafe", "Café"]

    def test_stable_for_equal_keys(self, make_record):
        records = [
            make_record("Lit", id="term-1"),
            make_record("based", id="term-2"),
            make_record("lit", id="term-3"),
            make_record("LIT", id="term-4"),
        ]
        assert [r.id for r in sort_alphabetical(records)] == [
            "term-2",
            "term-1",
            "term-3",
            "term-4",
        ]

    def test_non_sequence_input(self):
        assert sort_alphabetical(None) == []


class TestPaginate:

    def test_first_page_of_two(self, sample_records):
        result = paginate(sample_records, 1, 2)

        assert _terms(result.items) == ["based", "flex"]
        assert result.page == 1
        assert result.limit == 2
        assert result.total_items == 5
        assert result.total_pages == 3

    def test_last_partial_page(self, sample_records):
        result = paginate(sample_records, 3, 2)
        assert _terms(result.items) == ["vibe"]

    def test_empty_record_set(self):
        result = paginate([], 1, 10)
        assert result.model_dump(by_alias=True) == {
            "page": 1,
            "limit": 10,
            "totalItems": 0,
            "totalPages": 0,
            "items": [],
        }

    @pytest.mark.parametrize("page", [0, -3])
    def test_low_page_clamps_to_first(self, sample_records, page):
        assert paginate(sample_records, page, 10).page == 1

    def test_high_page_clamps_to_last(self, sample_records):
        result = paginate(sample_records, 999999, 2)
        assert result.page == result.total_pages == 3
        assert _terms(result.items) == ["vibe"]

    def test_limit_clamps_to_one(self, sample_records):
        result = paginate(sample_records, 2, 0)
        assert result.limit == 1
        assert result.total_pages == 5
        assert _terms(result.items) == ["flex"]

    def test_fractional_values_are_floored(self, sample_records):
        result = paginate(sample_records, 2.9, 2.5)
        assert result.page == 2
        assert result.limit == 2
        assert _terms(result.items) == ["lit", "salty"]

    def test_huge_limit_puts_everything_on_one_page(self, sample_records):
        result = paginate(sample_records, 1, 10**400)
        assert result.total_pages == 1
        assert result.limit == 10**400
        assert len(result.items) == 5

    def test_infinite_page_is_last_page(self, sample_records):
        result = paginate(sample_records, math.inf, 2)
        assert result.page == result.total_pages == 3
        assert _terms(result.items) == ["vibe"]

    def test_infinite_limit_is_one_page(self, sample_records):
        result = paginate(sample_records, 1, math.inf)
        assert result.limit == 5
        assert result.total_pages == 1
        assert len(result.items) == 5

    def test_negative_infinite_page_is_first_page(self, sample_records):
        assert paginate(sample_records, -math.inf, 2).page == 1

    @pytest.mark.parametrize("value", [None, "two", float("nan")])
    def test_unusable_values_fall_back_to_one(self, sample_records, value):
        result = paginate(sample_records, value, value)
        assert result.page == 1
        assert result.limit == 1

    def test_defaults(self, sample_records):
        result = paginate(sample_records)
        assert result.page == 1
        assert result.limit == 10
        assert len(result.items) == 5

    def test_non_sequence_echoes_limit(self):
        result = paginate(None, 4, 25)
        assert result.page == 1
        assert result.limit == 25
        assert result.total_items == 0
        assert result.total_pages == 0
        assert result.items == []

    @pytest.mark.parametrize("limit", [1, 2, 3, 4, 5, 7])
    def test_pages_cover_sorted_set_exactly(self, sample_records, limit):
        first = paginate(sample_records, 1, limit)
        collected = list(first.items)
        for page in range(2, first.total_pages + 1):
            collected.extend(paginate(sample_records, page, limit).items)

        assert collected == sort_alphabetical(sample_records)

    @pytest.mark.parametrize("page", [1, 2, 3])
    def test_items_are_alphabetical(self, sample_records, page):
        keys = [term.casefold() for term in _terms(paginate(sample_records, page, 2).items)]
        assert keys == sorted(keys)


class TestCount:

    def test_count_matches_length(self, sample_records):
        assert count(sample_records) == 5
        assert count([]) == 0

    @pytest.mark.parametrize("records", [None, 3, "abc"])
    def test_count_non_sequence(self, records):
        assert count(records) == 0

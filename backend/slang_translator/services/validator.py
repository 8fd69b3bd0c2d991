"""
Slang Translator Backend — Record Validator
=============================================

What:  Checks candidate records (and engine result envelopes) against the
       required-field schema.
Why:   The ingestor builds candidates from loosely structured markdown; only
       candidates passing every rule may enter the in-memory record set.
How:   Plain functions over dict-shaped values using the camelCase field
       names of the record format. Each rule violation appends one message;
       nothing is raised, whatever the input.
Who:   Called by the ingestor on every finalized candidate, and by tests on
       search/browse envelopes.

Message format:
    Top-level rules name the field directly:
        'Slang term must have a non-empty "definition" field'
    Nested failures are prefixed with their location:
        'Usage example at index 1: Usage example must have a non-empty "example" field'
        'Cultural context: Cultural context must have a non-empty "ageGroup" field'
"""

from collections.abc import Mapping
from numbers import Real
from typing import Any, List

from pydantic import BaseModel

from slang_translator.schemas.slang import ValidationResult

_MISSING = object()


def _as_mapping(value: Any) -> Any:
    # Models are validated in their wire form so optional None fields read as absent
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    return value


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_optional_string(mapping: Mapping, key: str) -> bool:
    value = mapping.get(key, _MISSING)
    return value is _MISSING or isinstance(value, str)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_non_negative_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and value >= 0


def _result(errors: List[str]) -> ValidationResult:
    return ValidationResult(is_valid=not errors, errors=errors)


def validate_usage_example(example: Any) -> ValidationResult:
    """Validates one usage example: non-empty `example`, optional string `context`."""
    example = _as_mapping(example)
    errors: List[str] = []

    if not isinstance(example, Mapping):
        errors.append("Usage example must be an object")
        return _result(errors)

    if not _is_non_empty_string(example.get("example")):
        errors.append('Usage example must have a non-empty "example" field')

    if not _is_optional_string(example, "context"):
        errors.append('Usage example "context" field must be a string if provided')

    return _result(errors)


def validate_cultural_context(context: Any) -> ValidationResult:
    """Validates the three required context fields and the optional notes."""
    context = _as_mapping(context)
    errors: List[str] = []

    if not isinstance(context, Mapping):
        errors.append("Cultural context must be an object")
        return _result(errors)

    for field in ("ageGroup", "socialSetting", "regionSpecificity"):
        if not _is_non_empty_string(context.get(field)):
            errors.append(f'Cultural context must have a non-empty "{field}" field')

    if not _is_optional_string(context, "additionalNotes"):
        errors.append(
            'Cultural context "additionalNotes" field must be a string if provided'
        )

    return _result(errors)


def validate_slang_record(candidate: Any) -> ValidationResult:
    """
    Validate a candidate slang record.

    Rules:
        - candidate is a mapping (or a Pydantic model, checked in alias form)
        - id, term, definition are strings with non-whitespace content
        - formalTranslation, createdAt, updatedAt are strings when present
        - usageExamples is a non-empty list; every element passes
          validate_usage_example (failures carry the element index)
        - culturalContext is present and passes validate_cultural_context

    Returns:
        ValidationResult with one message per violated rule, in rule order.
    """
    candidate = _as_mapping(candidate)
    errors: List[str] = []

    if not isinstance(candidate, Mapping):
        errors.append("Slang term must be an object")
        return _result(errors)

    for field in ("id", "term", "definition"):
        if not _is_non_empty_string(candidate.get(field)):
            errors.append(f'Slang term must have a non-empty "{field}" field')

    if not _is_optional_string(candidate, "formalTranslation"):
        errors.append(
            'Slang term "formalTranslation" field must be a string if provided'
        )

    examples = candidate.get("usageExamples")
    if not _is_sequence(examples):
        errors.append('Slang term must have "usageExamples" as an array')
    elif len(examples) == 0:
        errors.append("Slang term must have at least one usage example")
    else:
        for index, example in enumerate(examples):
            example_result = validate_usage_example(example)
            if not example_result.is_valid:
                errors.append(
                    f"Usage example at index {index}: {', '.join(example_result.errors)}"
                )

    context = candidate.get("culturalContext")
    if not context:
        errors.append('Slang term must have a "culturalContext" field')
    else:
        context_result = validate_cultural_context(context)
        if not context_result.is_valid:
            errors.append(f"Cultural context: {', '.join(context_result.errors)}")

    for field in ("createdAt", "updatedAt"):
        if not _is_optional_string(candidate, field):
            errors.append(f'Slang term "{field}" field must be a string if provided')

    return _result(errors)


def _validate_record_list(records: Any, label: str, errors: List[str]) -> None:
    for index, record in enumerate(records):
        record_result = validate_slang_record(record)
        if not record_result.is_valid:
            errors.append(f"{label} at index {index}: {', '.join(record_result.errors)}")


def validate_search_result(result: Any) -> ValidationResult:
    """Checks a search envelope: query, totalResults, results, executionTime."""
    result = _as_mapping(result)
    errors: List[str] = []

    if not isinstance(result, Mapping):
        errors.append("Search result must be an object")
        return _result(errors)

    if not isinstance(result.get("query"), str):
        errors.append('Search result must have a "query" field of type string')

    if not _is_non_negative_number(result.get("totalResults")):
        errors.append('Search result must have a "totalResults" field of type number >= 0')

    results = result.get("results")
    if not _is_sequence(results):
        errors.append('Search result must have "results" as an array')
    else:
        _validate_record_list(results, "Result", errors)

    if not _is_non_negative_number(result.get("executionTime")):
        errors.append(
            'Search result must have an "executionTime" field of type number >= 0'
        )

    return _result(errors)


def validate_browse_result(result: Any) -> ValidationResult:
    """Checks a browse envelope: page/limit >= 1, totals >= 0, valid items."""
    result = _as_mapping(result)
    errors: List[str] = []

    if not isinstance(result, Mapping):
        errors.append("Browse result must be an object")
        return _result(errors)

    for field, minimum in (("page", 1), ("limit", 1), ("totalItems", 0), ("totalPages", 0)):
        value = result.get(field)
        if not _is_non_negative_number(value) or value < minimum:
            errors.append(
                f'Browse result must have a "{field}" field of type number >= {minimum}'
            )

    items = result.get("items")
    if not _is_sequence(items):
        errors.append('Browse result must have "items" as an array')
    else:
        _validate_record_list(items, "Item", errors)

    return _result(errors)

"""
Slang Translator Backend — Markdown Ingestor
==============================================

What:  Parses the structured markdown source document into validated
       SlangRecord objects.
Why:   The catalog is authored as human-editable markdown; the API needs
       typed, validated records.
How:   Single forward pass over lines. A parse state object carries the
       heading counter, the pending candidate and the open subsection from
       line to line. Each candidate is validated when the next heading (or
       the end of the document) finalizes it.
Who:   Called once at startup by SlangCatalog.from_file().

Document format:
    ## lit
    Definition: Exciting or excellent
    Formal Translation: Amazing
    Usage Examples:
    - That party was lit!
    Cultural Context:
    - Age Group: teens
    - Social Setting: casual
    - Region Specificity: city-wide
    - Additional Notes: Popular in urban areas

Failure semantics:
    - A candidate failing validation is dropped and reported as one string
      'Term "<term>": <messages>'. Its id number is NOT handed to the next
      record, so ids stay tied to heading position in the document.
    - An unreadable document yields zero records and exactly one error
      'Error reading file: <reason>'. Nothing is raised to the caller.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from slang_translator.exceptions import SourceReadError
from slang_translator.schemas.slang import IngestResult, SlangRecord
from slang_translator.services.validator import validate_slang_record

logger = logging.getLogger(__name__)

HEADING_PREFIX = "## "
COMMENT_PREFIX = "<!--"
BULLET_PREFIX = "- "

DEFINITION_LABEL = "Definition:"
FORMAL_TRANSLATION_LABEL = "Formal Translation:"

USAGE_SECTION = "Usage Examples:"
CONTEXT_SECTION = "Cultural Context:"

# Bullet label → culturalContext key
CONTEXT_FIELDS = {
    "Age Group:": "ageGroup",
    "Social Setting:": "socialSetting",
    "Region Specificity:": "regionSpecificity",
    "Additional Notes:": "additionalNotes",
}


@dataclass
class _ParseState:
    """Accumulator threaded through the line loop; one per parse call."""

    heading_count: int = 0
    candidate: Optional[Dict[str, Any]] = None
    section: Optional[str] = None
    records: List[SlangRecord] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)


def _new_candidate(term: str, number: int) -> Dict[str, Any]:
    return {
        "id": f"term-{number}",
        "term": term,
        "definition": "",
        "usageExamples": [],
        "culturalContext": {
            "ageGroup": "",
            "socialSetting": "",
            "regionSpecificity": "",
            "additionalNotes": "",
        },
    }


def _finalize(state: _ParseState) -> None:
    """Validate the pending candidate and move it to records or errors."""
    candidate = state.candidate
    state.candidate = None
    if candidate is None:
        return

    validation = validate_slang_record(candidate)
    if validation.is_valid:
        state.records.append(SlangRecord.model_validate(candidate))
        return

    message = f'Term "{candidate["term"]}": {", ".join(validation.errors)}'
    logger.warning("Skipping invalid term %s: %s", candidate["id"], message)
    state.errors.append(message)


def _consume_line(state: _ParseState, raw_line: str) -> None:
    line = raw_line.strip()

    if not line or line.startswith(COMMENT_PREFIX):
        return

    if line.startswith(HEADING_PREFIX):
        _finalize(state)
        state.heading_count += 1
        state.candidate = _new_candidate(
            line[len(HEADING_PREFIX):].strip(), state.heading_count
        )
        state.section = None
        return

    candidate = state.candidate
    if candidate is None:
        return

    if line.startswith(DEFINITION_LABEL):
        candidate["definition"] = line[len(DEFINITION_LABEL):].strip()
        state.section = None
        return

    if line.startswith(FORMAL_TRANSLATION_LABEL):
        candidate["formalTranslation"] = line[len(FORMAL_TRANSLATION_LABEL):].strip()
        state.section = None
        return

    if line in (USAGE_SECTION, CONTEXT_SECTION):
        state.section = line
        return

    if not line.startswith(BULLET_PREFIX):
        return
    bullet = line[len(BULLET_PREFIX):].strip()

    if state.section == USAGE_SECTION:
        if bullet:
            candidate["usageExamples"].append({"example": bullet, "context": ""})
    elif state.section == CONTEXT_SECTION:
        for label, key in CONTEXT_FIELDS.items():
            if bullet.startswith(label):
                candidate["culturalContext"][key] = bullet[len(label):].strip()
                break


def parse_markdown(text: str) -> IngestResult:
    """
    Parse a markdown document into validated records.

    Args:
        text: Full document contents.

    Returns:
        IngestResult with accepted records in document order and one error
        string per rejected candidate.
    """
    state = _ParseState()
    for raw_line in text.splitlines():
        _consume_line(state, raw_line)
    _finalize(state)

    return IngestResult(records=state.records, errors=state.errors)


def read_source(path: Union[str, Path]) -> str:
    """
    Read the source document as UTF-8 text.

    Raises:
        SourceReadError: the file is missing, unreadable or not valid UTF-8.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path=str(path), reason=str(e)) from e


def ingest_file(path: Union[str, Path]) -> IngestResult:
    """
    Load and parse the source document at `path`.

    Never raises: a read failure becomes the single entry of `errors`.
    """
    try:
        text = read_source(path)
    except SourceReadError as e:
        logger.error("Could not read slang source %s: %s", e.path, e.reason)
        return IngestResult(records=[], errors=[f"Error reading file: {e.reason}"])

    result = parse_markdown(text)
    logger.info(
        "Ingested %d terms from %s (%d rejected)",
        len(result.records),
        path,
        len(result.errors),
    )
    return result

import json
import logging
import re
from typing import Any, List

from .errors import ExtractionError, ParseError, ShapeValidationError
from .models import GiftIdea

log = logging.getLogger(__name__)

# An array holding at least one {...} object, prose allowed around it
STRICT_ARRAY_RE = re.compile(r"\[\s*\{[\s\S]*\}\s*\]")
# Anything between the outermost brackets
LOOSE_ARRAY_RE = re.compile(r"\[[\s\S]*\]")

REQUIRED_FIELDS = ("name", "description", "reason", "priceRange")

INVALID_FORMAT = "The AI generated an invalid response format. Please try again."


def extract_json_array(text: str) -> str:
    """Finds the JSON array embedded in a model reply."""
    m = STRICT_ARRAY_RE.search(text or "")
    if m:
        return m.group(0)

    log.warning("No array of objects in response, trying loose match. Full response: %s", text)
    m = LOOSE_ARRAY_RE.search(text or "")
    if m:
        return m.group(0)

    raise ExtractionError()


def _has_required_fields(item: Any) -> bool:
    if not isinstance(item, dict):
        return False
    return all(item.get(k) for k in REQUIRED_FIELDS)


def parse_gift_ideas(json_text: str) -> List[GiftIdea]:
    """
    Parses the candidate array and checks its shape.

    Only the first element is checked for the required fields. Later elements
    are read as-is, and anything that is not an object is skipped.
    """
    log.debug("Attempting to parse JSON: %s...", json_text[:100])
    try:
        data = json.loads(json_text)
    except ValueError as e:
        log.error("JSON parse error: %s. Text attempted to parse: %s", e, json_text)
        raise ParseError() from e

    if not isinstance(data, list) or not data:
        log.error("Parsed JSON is not a valid array or is empty: %r", data)
        raise ShapeValidationError(INVALID_FORMAT)

    if not _has_required_fields(data[0]):
        log.error("Parsed JSON items are missing required properties: %r", data[0])
        raise ShapeValidationError()

    ideas = []
    for idx, it in enumerate(data):
        if not isinstance(it, dict):
            log.warning("Skipping gift idea %d, not an object: %r", idx, it)
            continue
        ideas.append(GiftIdea.model_validate(it))
    return ideas

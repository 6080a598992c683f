import logging
import re

from pydantic import ValidationError

from reuse_architect.core.domain.entities.generated_result import GeneratedResult
from reuse_architect.core.domain.exceptions.malformed_result_error import MalformedResultError

logger = logging.getLogger(__name__)

_FENCE_PATTERN = re.compile(r"```(?:json)?")
_RAW_TAIL_CHARS = 100


def strip_code_fences(text: str) -> str:
    """Remove every Markdown code fence marker and trim surrounding whitespace."""
    return _FENCE_PATTERN.sub("", text).strip()


def recover_generated_result(raw: str) -> GeneratedResult:
    """
    Turn the raw model answer into a GeneratedResult.

    Two attempts only: a strict parse of the text as received, then one more
    parse after fence stripping. Anything else is a malformed answer; no partial
    result is ever returned.

    Raises:
        MalformedResultError: If neither attempt yields a valid GeneratedResult.
    """
    try:
        return GeneratedResult.model_validate_json(raw)
    except ValidationError as first_error:
        logger.warning("First parse attempt failed, stripping code fences: %s", _summary(first_error))

    try:
        return GeneratedResult.model_validate_json(strip_code_fences(raw))
    except ValidationError as second_error:
        tail = raw[-_RAW_TAIL_CHARS:]
        logger.error("JSON parse critical error: %s", _summary(second_error))
        logger.error("Raw response tail: %s", tail)
        raise MalformedResultError(raw_tail=tail) from second_error


def _summary(error: ValidationError) -> str:
    first = error.errors()[0] if error.error_count() else {}
    return f"{first.get('type', 'unknown')}: {first.get('msg', '')}"

"""Unwrap agent answers from the JSON envelope printed on stdout."""

from __future__ import annotations

import json
import re
from typing import Any

from ai_linter.orchestrator.errors import EnvelopeError, ExtractionError

FENCE = "```"

_LANGUAGE_TAG = re.compile(r"^(?:json\b|[A-Za-z][\w+.-]*(?=\s))", re.IGNORECASE)

Extracted = str | dict[str, Any] | list[Any]


def extract_object_result(stdout: str) -> Extracted:
    """Read ``result`` from a single JSON object envelope."""

    parsed = _load_envelope(stdout)
    result = parsed.get("result") if isinstance(parsed, dict) else None
    return _unwrap_result(result, stdout=stdout)


def extract_last_event_result(stdout: str) -> Extracted:
    """Read ``result`` from the last element of a JSON array envelope.

    Earlier elements are progress events and may have any shape.
    """

    parsed = _load_envelope(stdout)
    last = parsed[-1] if isinstance(parsed, list) and parsed else None
    result = last.get("result") if isinstance(last, dict) else None
    return _unwrap_result(result, stdout=stdout)


def strip_code_fences(text: str) -> str:
    """Return the fenced payload, or the trimmed text when there is no fence.

    Prose before the opening fence is discarded, as is a language tag right
    after it (```` ```json ````). The payload runs to the last closing fence,
    so backticks inside JSON strings survive. A missing closing fence is
    tolerated.
    """

    stripped = text.strip()
    start = stripped.find(FENCE)
    if start == -1:
        return stripped

    body = _LANGUAGE_TAG.sub("", stripped[start + len(FENCE) :], count=1)
    end = body.rfind(FENCE)
    if end != -1:
        body = body[:end]
    return body.strip()


def parse_payload(value: Extracted) -> Any:
    """Parse an extracted text payload as JSON; structured values pass through."""

    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError as error:
        raise ExtractionError(
            f"Agent result is not valid JSON ({error}): {value[:500]}",
        ) from error


def _load_envelope(stdout: str) -> Any:
    try:
        return json.loads(stdout)
    except json.JSONDecodeError as error:
        raise EnvelopeError(f"Agent stdout is not a JSON envelope ({error}): {stdout}") from error


def _unwrap_result(result: Any, *, stdout: str) -> Extracted:
    if result is None:
        raise EnvelopeError(f"Agent response missing 'result' field: {stdout}")
    if isinstance(result, (dict, list)):
        return result
    if not isinstance(result, str):
        raise ExtractionError(f"Unknown result type: {type(result).__name__} ({result!r})")
    return strip_code_fences(result)

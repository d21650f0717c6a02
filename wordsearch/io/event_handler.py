"""Lambda-style event adapter.

Reads ``words`` and ``pdf`` from ``queryStringParameters`` or from the
``body`` (a mapping or a JSON string) and answers with an API Gateway proxy
response: JSON for puzzles and errors, base64 for PDFs.
"""

from __future__ import annotations

import base64
import json
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..service import BAD_REQUEST, WordSearchRequest, WordSearchService
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}
PDF_HEADERS = {
    "Content-Type": "application/pdf",
    "Content-Disposition": "attachment; filename=wordsearch.pdf",
}
TRUE_STRINGS = {"true", "1", "yes", "on"}


def parse_words(value: Any) -> List[str]:
    """Accept a list of words or one comma-separated string."""

    if isinstance(value, (list, tuple)):
        return [str(word) for word in value]
    return [part.strip() for part in str(value or "").split(",") if part.strip()]


def parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value) if isinstance(value, (int, float)) else False


def _decode_body(body: Any) -> Mapping[str, Any]:
    if isinstance(body, str):
        try:
            body = json.loads(body)
        except json.JSONDecodeError:
            LOGGER.debug("Event body is not JSON; ignoring it")
            return {}
    return body if isinstance(body, Mapping) else {}


def extract_request(event: Mapping[str, Any]) -> Tuple[Optional[List[str]], bool, Optional[str]]:
    """Return ``(words, pdf, footer)``; ``words`` is None when none were supplied."""

    words: Optional[List[str]] = None
    wants_pdf = False
    footer: Optional[str] = None

    params = event.get("queryStringParameters") or {}
    if isinstance(params, Mapping):
        if "pdf" in params:
            wants_pdf = parse_flag(params["pdf"])
        if "words" in params:
            words = parse_words(params["words"])
        footer = params.get("footerUrl") or footer

    if words is None and "body" in event:
        body = _decode_body(event["body"])
        if "pdf" in body:
            wants_pdf = parse_flag(body["pdf"])
        if "words" in body:
            words = parse_words(body["words"])
        footer = body.get("footerUrl") or footer
    return words, wants_pdf, footer


def error_response(status_code: int, message: str) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "isBase64Encoded": False,
        "body": json.dumps({"error": message}, ensure_ascii=False),
    }


def handle_event(
    event: Optional[Mapping[str, Any]],
    context: Any = None,
    service: Optional[WordSearchService] = None,
) -> Dict[str, Any]:
    words, wants_pdf, footer = extract_request(event or {})
    if words is None:
        LOGGER.warning("Event carried no words")
        return error_response(BAD_REQUEST, "No words provided")

    service = service or WordSearchService()
    result = service.generate_puzzle(WordSearchRequest(words=words, pdf=wants_pdf, footer=footer))
    if result.is_error:
        return error_response(result.status_code, result.error or "Unknown error")

    if wants_pdf:
        return {
            "statusCode": 200,
            "headers": dict(PDF_HEADERS),
            "isBase64Encoded": True,
            "body": base64.b64encode(result.pdf_bytes or b"").decode("ascii"),
        }
    return {
        "statusCode": 200,
        "headers": dict(JSON_HEADERS),
        "isBase64Encoded": False,
        "body": json.dumps(result.json, ensure_ascii=False),
    }

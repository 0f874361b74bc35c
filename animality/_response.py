"""Parsing of raw HTTP/1.0 responses read off the wire."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from animality.exceptions import HTTPStatusError, MalformedReason, MalformedResponseError

logger = logging.getLogger(__name__)

SEPARATOR = b"\r\n\r\n"


@dataclass
class RawResponse:
    """A response split into its status line, headers and body."""

    status_code: int
    reason: str
    headers: httpx.Headers
    body: bytes

    @property
    def is_error(self) -> bool:
        return self.status_code >= 400


def split_response(raw: bytes) -> RawResponse:
    """Split a fully buffered response into a :class:`RawResponse`.

    Everything before the first blank line is the header block; everything
    after it is the body. The status code is the second whitespace-separated
    token of the first line, and the reason phrase is whatever follows it.

    Raises:
        :class:`~animality.MalformedResponseError`: No header/body separator,
            or the status line carries no numeric code.
    """
    head, sep, body = raw.partition(SEPARATOR)
    if not sep:
        raise MalformedResponseError(
            "response has no header/body separator",
            reason=MalformedReason.NO_SEPARATOR,
        )

    text = head.decode("latin-1")
    status_line, *header_lines = text.split("\r\n")

    parts = status_line.split(None, 2)
    # latin-1 lets through superscript digits, which int() rejects
    if len(parts) < 2 or not (parts[1].isascii() and parts[1].isdigit()):
        raise MalformedResponseError(
            f"cannot parse status line {status_line[:80]!r}",
            reason=MalformedReason.BAD_STATUS_LINE,
        )
    status_code = int(parts[1])
    reason = parts[2].strip() if len(parts) > 2 else ""
    if not reason:
        reason = httpx.codes.get_reason_phrase(status_code)

    headers = []
    for line in header_lines:
        name, colon, value = line.partition(":")
        if not colon:
            continue
        headers.append((name.strip(), value.strip()))

    return RawResponse(
        status_code=status_code,
        reason=reason,
        headers=httpx.Headers(headers),
        body=body,
    )


def decode(raw: bytes) -> dict[str, Any]:
    """Turn a raw response into its JSON object payload.

    The body of an error response (status >= 400) is never parsed.
    """
    resp = split_response(raw)
    if resp.is_error:
        logger.debug("API answered %d %s", resp.status_code, resp.reason)
        raise HTTPStatusError(resp.status_code, resp.reason)

    try:
        payload = json.loads(resp.body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise MalformedResponseError(
            f"response body is not valid JSON: {exc}",
            reason=MalformedReason.INVALID_JSON,
            cause=exc,
        ) from exc

    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"expected a JSON object, got {type(payload).__name__}",
            reason=MalformedReason.NOT_AN_OBJECT,
        )
    return payload


def extract_string(payload: dict[str, Any], field: str) -> str:
    """Return ``payload[field]``, which must be a JSON string."""
    if field not in payload:
        raise MalformedResponseError(
            f"response has no {field!r} field",
            reason=MalformedReason.MISSING_FIELD,
        )
    value = payload[field]
    if not isinstance(value, str):
        raise MalformedResponseError(
            f"response field {field!r} is {type(value).__name__}, not a string",
            reason=MalformedReason.WRONG_FIELD_TYPE,
        )
    return value

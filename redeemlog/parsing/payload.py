"""Locate and decode the JSON payload embedded in a log message."""

import json
import logging
import re

logger = logging.getLogger(__name__)

PAYLOAD_FINGERPRINT = '"broadcaster_user_id"'

# Greedy: first "{" before the fingerprint through the last "}" after it.
_PAYLOAD_SPAN_RE = re.compile(r"\{.*" + re.escape(PAYLOAD_FINGERPRINT) + r".*\}", re.DOTALL)

_decoder = json.JSONDecoder()


class PayloadNotFound(ValueError):
    """No brace span carrying the fingerprint exists in the message."""


class InvalidPayload(ValueError):
    """A fingerprinted span exists but no JSON object could be decoded from it."""


def locate_payload(message: str) -> str | None:
    """Return the first-``{``-to-last-``}`` span containing the fingerprint, or None."""
    match = _PAYLOAD_SPAN_RE.search(message)
    return match.group(0) if match else None


def parse_payload(message: str) -> dict:
    """Decode the embedded event payload from a noisy log message.

    Tries the greedy span first. When unrelated braces before or after the
    payload make that span invalid, scans each ``{`` for a balanced JSON
    object whose text carries the fingerprint.

    Raises:
        PayloadNotFound: no fingerprinted span in the message.
        InvalidPayload: the span exists but nothing in it decodes.
    """
    span = locate_payload(message)
    if span is None:
        raise PayloadNotFound("no brace span containing the payload fingerprint")

    # The span always opens with "{", so a clean decode is an object.
    try:
        return json.loads(span)
    except json.JSONDecodeError as exc:
        first_error = str(exc)

    payload = _scan_balanced_objects(span)
    if payload is not None:
        logger.debug("Recovered payload by balanced scan after greedy span failed")
        return payload

    raise InvalidPayload(first_error)


def _scan_balanced_objects(text: str) -> dict | None:
    """Return the first decodable JSON object in ``text`` that carries the fingerprint."""
    start = text.find("{")
    while start != -1:
        try:
            obj, end = _decoder.raw_decode(text, start)
        except json.JSONDecodeError:
            pass
        else:
            if isinstance(obj, dict) and PAYLOAD_FINGERPRINT in text[start:end]:
                return obj
        start = text.find("{", start + 1)
    return None

"""
Envelope codec.

A session record is stored as one JSON document holding two members:

    {
        "cookie": {"name": ..., "value": ..., "domain": ..., "path": ...,
                   "max_age": ..., "http_only": ..., "secure": ..., "samesite": ...},
        "data": {...}
    }

`cookie` is enough to rebuild the outgoing Set-Cookie header without looking
at configuration again, `data` is the application payload and is never
interpreted here.
"""

import json
import logging
from typing import Any, Dict, Mapping, NamedTuple, Optional

from pydantic import ValidationError

from .errors import EnvelopeCorrupt
from .models import CookieAttributes

logger = logging.getLogger('sessions.envelope')

COOKIE_FIELD = "cookie"
DATA_FIELD = "data"


class DecodedEnvelope(NamedTuple):
    cookie: Optional[CookieAttributes]
    data: Dict[str, Any]
    ok: bool


_INVALID = DecodedEnvelope(cookie=None, data={}, ok=False)


def encode_envelope(cookie: CookieAttributes, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Combine cookie attributes and payload into one envelope document."""
    return {
        COOKIE_FIELD: cookie.model_dump(mode="json", by_alias=True),
        DATA_FIELD: data if data is not None else {},
    }


def decode_envelope(document: Any) -> DecodedEnvelope:
    """
    Split an envelope document into cookie attributes and payload.

    Never raises: anything that is not a complete envelope yields a result
    with `ok=False`.
    """
    if not isinstance(document, Mapping):
        return _INVALID

    cookie_node = document.get(COOKIE_FIELD)
    data_node = document.get(DATA_FIELD)

    if not isinstance(cookie_node, Mapping) or not isinstance(data_node, dict):
        return _INVALID

    try:
        cookie = CookieAttributes.model_validate(dict(cookie_node))
    except ValidationError as e:
        logger.debug(f"Envelope cookie failed validation: {e.error_count()} error(s)")
        return _INVALID

    return DecodedEnvelope(cookie=cookie, data=data_node, ok=True)


def dumps_envelope(document: Mapping[str, Any], indent: Optional[int] = 4) -> str:
    """Serialize an envelope to the text form stored in the backend."""
    return json.dumps(document, indent=indent)


def loads_envelope(text: str) -> Dict[str, Any]:
    """
    Parse stored envelope text, compact or pretty printed.

    Empty text loads as an empty document. Raises EnvelopeCorrupt when the
    text is not JSON or its top level is not an object.
    """
    if not text:
        return {}

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise EnvelopeCorrupt(f"Session record is not valid JSON: {e}") from e

    if not isinstance(document, dict):
        raise EnvelopeCorrupt(f"Session record must be a JSON object, got {type(document).__name__}")

    return document

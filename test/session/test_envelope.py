import json

import pytest

from session import CookieAttributes, EnvelopeCorrupt, SameSite
from session.envelope import decode_envelope, dumps_envelope, encode_envelope, loads_envelope


@pytest.fixture
def cookie():
    return CookieAttributes(
        name="session",
        value="sess:7d0c9a53-2f4e-4b8e-9a51-0b1a3f6c2d11",
        domain="example.com",
        path="/app",
        max_age=600,
        http_only=True,
        secure=True,
        same_site=SameSite.NONE,
    )


def test_encode_layout(cookie):
    document = encode_envelope(cookie, {"cart": [1, 2]})

    assert set(document) == {"cookie", "data"}
    assert document["data"] == {"cart": [1, 2]}
    assert document["cookie"] == {
        "name": "session",
        "value": "sess:7d0c9a53-2f4e-4b8e-9a51-0b1a3f6c2d11",
        "domain": "example.com",
        "path": "/app",
        "max_age": 600,
        "http_only": True,
        "secure": True,
        "samesite": "none",
    }


def test_encode_without_payload_uses_empty_object(cookie):
    assert encode_envelope(cookie)["data"] == {}


def test_round_trip(cookie):
    payload = {"user": {"name": "ada", "roles": ["admin"]}, "visits": 3}

    decoded = decode_envelope(encode_envelope(cookie, payload))

    assert decoded == (cookie, payload, True)


def test_round_trip_through_text(cookie):
    text = dumps_envelope(encode_envelope(cookie, {"theme": "dark"}))

    decoded_cookie, data, ok = decode_envelope(loads_envelope(text))

    assert ok
    assert decoded_cookie == cookie
    assert data == {"theme": "dark"}


def test_loads_accepts_compact_and_pretty(cookie):
    document = encode_envelope(cookie, {"a": 1})

    assert loads_envelope(json.dumps(document)) == document
    assert loads_envelope(dumps_envelope(document, indent=4)) == document
    assert loads_envelope(dumps_envelope(document, indent=None)) == document


def test_dumps_is_pretty_printed_by_default(cookie):
    assert "\n    " in dumps_envelope(encode_envelope(cookie))


def test_loads_empty_text():
    assert loads_envelope("") == {}


@pytest.mark.parametrize("text", ["{not json", "[1, 2]", '"session"', "42", "null"])
def test_loads_rejects_malformed_records(text):
    with pytest.raises(EnvelopeCorrupt):
        loads_envelope(text)


@pytest.mark.parametrize(
    "document",
    [
        None,
        "text",
        [],
        {},
        {"data": {}},
        {"cookie": {"name": "s", "value": "v", "max_age": 10}},
        {"cookie": [], "data": {}},
        {"cookie": "session=v", "data": {}},
        {"cookie": {"name": "s", "value": "v", "max_age": 10}, "data": []},
        {"cookie": {"name": "s", "value": "v", "max_age": 10}, "data": None},
        {"cookie": {"name": "s", "max_age": 10}, "data": {}},
        {"cookie": {"name": "s", "value": "v", "max_age": "soon"}, "data": {}},
        {"cookie": {"name": "s", "value": "v", "max_age": 10, "samesite": "sometimes"}, "data": {}},
        {"cookie": {"name": "s", "value": "v", "max_age": 0}, "data": {}},
    ],
)
def test_decode_malformed_documents_is_safe(document):
    decoded = decode_envelope(document)

    assert decoded.ok is False
    assert decoded.cookie is None


def test_decode_accepts_minimal_cookie():
    decoded = decode_envelope({"cookie": {"name": "s", "value": "v", "max_age": 10}, "data": {}})

    assert decoded.ok
    assert decoded.cookie.path == "/"
    assert decoded.cookie.same_site == SameSite.LAX

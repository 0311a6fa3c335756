"""Testes da assinatura HMAC-SHA256 dos pushes Shopee."""

from __future__ import annotations

import hashlib
import hmac

import pytest

from api.connectors.shopee.signature import (
    build_canonical_input,
    compute_push_signature,
    verify,
    verify_push_signature,
)
from app.protocols.models import InboundWebhook

URL = "https://relay.example.com/shopee/push"
BODY = b'{"code": 10, "data": {"content": "hi", "from_id": "u1"}}'
KEY = b"partner-key"


def _sign(url: str, body: bytes, key: bytes) -> str:
    return hmac.new(key, url.encode("utf-8") + b"|" + body, hashlib.sha256).hexdigest()


def test_canonical_input_is_url_pipe_body() -> None:
    assert build_canonical_input(URL, BODY) == URL.encode("utf-8") + b"|" + BODY


def test_canonical_input_keeps_bytes_verbatim() -> None:
    url = "https://relay.example.com/push/?shop=1"
    body = b'{ "a" :1 }\n'
    assert build_canonical_input(url, body) == b'https://relay.example.com/push/?shop=1|{ "a" :1 }\n'


def test_compute_push_signature_is_lowercase_hex() -> None:
    signature = compute_push_signature(build_canonical_input(URL, BODY), KEY)

    assert signature == _sign(URL, BODY, KEY)
    assert len(signature) == 64
    assert signature == signature.lower()


def test_verify_accepts_matching_signature() -> None:
    canonical = build_canonical_input(URL, BODY)
    assert verify(canonical, _sign(URL, BODY, KEY), KEY) is True


@pytest.mark.parametrize(
    ("url", "body"),
    [
        (URL + "/", BODY),
        (URL + "?a=1", BODY),
        (URL.replace("https", "http"), BODY),
        (URL, BODY + b" "),
        (URL, BODY.replace(b"hi", b"ho")),
    ],
)
def test_verify_rejects_any_mutation_of_url_or_body(url: str, body: bytes) -> None:
    signature = _sign(URL, BODY, KEY)
    assert verify(build_canonical_input(url, body), signature, KEY) is False


def test_verify_rejects_mutated_signature() -> None:
    signature = _sign(URL, BODY, KEY)
    mutated = ("0" if signature[0] != "0" else "1") + signature[1:]

    assert verify(build_canonical_input(URL, BODY), mutated, KEY) is False


def test_verify_rejects_other_key() -> None:
    signature = _sign(URL, BODY, b"other-key")
    assert verify(build_canonical_input(URL, BODY), signature, KEY) is False


def test_verify_is_case_sensitive() -> None:
    signature = _sign(URL, BODY, KEY).upper()
    assert verify(build_canonical_input(URL, BODY), signature, KEY) is False


@pytest.mark.parametrize("signature", ["", "not-hex", "é" * 64, "sha256=" + "0" * 64])
def test_verify_never_raises_on_malformed_signature(signature: str) -> None:
    assert verify(build_canonical_input(URL, BODY), signature, KEY) is False


def test_verify_does_not_depend_on_json_validity() -> None:
    body = b"not json at all"
    assert verify(build_canonical_input(URL, body), _sign(URL, body, KEY), KEY) is True


def test_verify_push_signature_valid() -> None:
    webhook = InboundWebhook(raw_body=BODY, request_url=URL, signature_header=_sign(URL, BODY, KEY))

    result = verify_push_signature(webhook, "partner-key")

    assert result.valid is True
    assert result.reason is None


def test_verify_push_signature_invalid_has_reason() -> None:
    webhook = InboundWebhook(raw_body=BODY, request_url=URL, signature_header="deadbeef")

    result = verify_push_signature(webhook, "partner-key")

    assert result.valid is False
    assert result.reason == "signature_mismatch"

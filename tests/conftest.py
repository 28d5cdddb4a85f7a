# tests/conftest.py
import base64
import json

import pytest


def b64url(raw: bytes | str) -> str:
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def make_token(body, header=None, signature: str = "sig") -> str:
    """Unsigned compact token; `body` may be a dict (JSON-encoded) or raw text."""
    header = header if header is not None else {"alg": "none"}
    body_text = body if isinstance(body, str) else json.dumps(body)
    return ".".join([b64url(json.dumps(header)), b64url(body_text), b64url(signature)])


@pytest.fixture
def example_token() -> str:
    return make_token({"sub": "u1", "exp": 1000000000})

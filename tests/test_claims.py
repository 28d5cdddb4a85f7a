# tests/test_claims.py
from datetime import datetime, timezone
from typing import List

import pytest
from pydantic import BaseModel

from conftest import make_token
from pkg_token import (
    ClaimDecodeError,
    StandardClaims,
    TokenDecodeError,
    decode,
    field,
    integer,
    json_object_decoder,
    optional_field,
    pydantic_claims,
    standard_claims_decoder,
    string,
    timestamp_field,
)
from pkg_token.adapters.claims import audience


# --- value decoders ----------------------------------------------------------


def test_string():
    assert string("x") == "x"
    with pytest.raises(ClaimDecodeError):
        string(1)


def test_integer():
    assert integer(5) == 5
    assert integer(5.0) == 5
    for bad in (5.5, True, "5", None, [5]):
        with pytest.raises(ClaimDecodeError):
            integer(bad)


def test_timestamp_field():
    assert timestamp_field(1000000000) == datetime(2001, 9, 9, 1, 46, 40, tzinfo=timezone.utc)
    assert timestamp_field(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    with pytest.raises(ClaimDecodeError):
        timestamp_field("1000000000")


def test_audience():
    assert audience("api") == "api"
    assert audience(["api", "web"]) == ("api", "web")
    assert audience([]) == ()
    with pytest.raises(ClaimDecodeError):
        audience(["api", 1])
    with pytest.raises(ClaimDecodeError):
        audience({"aud": "api"})


# --- field decoders ----------------------------------------------------------


def test_field():
    exp = field("exp", integer)
    assert exp({"exp": 10}) == 10

    with pytest.raises(ClaimDecodeError) as exc_info:
        exp({})
    assert "exp" in str(exc_info.value)

    with pytest.raises(ClaimDecodeError) as exc_info:
        exp({"exp": "10"})
    assert "exp" in str(exc_info.value)


def test_optional_field():
    sub = optional_field("sub", string)
    assert sub({"sub": "u1"}) == "u1"
    assert sub({}) is None
    assert sub({"sub": None}) is None

    # present with the wrong type is still an error
    with pytest.raises(ClaimDecodeError):
        sub({"sub": 1})


def test_json_object_decoder():
    decoder = json_object_decoder(field("n", integer))
    assert decoder('{"n": 3}') == 3

    with pytest.raises(ClaimDecodeError):
        decoder("3")
    with pytest.raises(ValueError):
        decoder("{")


# --- standard claims ---------------------------------------------------------


def test_standard_claims_all_fields():
    body = (
        '{"sub": "u1", "iss": "https://issuer", "aud": "api", "exp": 1000000000,'
        ' "nbf": 999999000, "iat": 999998000, "jti": "abc", "extra": [1, 2]}'
    )
    claims = standard_claims_decoder(body)

    assert claims == StandardClaims(
        subject="u1",
        issuer="https://issuer",
        audience="api",
        expires_at=datetime(2001, 9, 9, 1, 46, 40, tzinfo=timezone.utc),
        not_before=datetime(2001, 9, 9, 1, 30, 0, tzinfo=timezone.utc),
        issued_at=datetime(2001, 9, 9, 1, 13, 20, tzinfo=timezone.utc),
        token_id="abc",
    )


def test_standard_claims_empty_body():
    assert standard_claims_decoder("{}") == StandardClaims()


@pytest.mark.parametrize(
    "body",
    [
        {"sub": 1},
        {"iss": ["x"]},
        {"aud": 5},
        {"exp": "soon"},
        {"nbf": 1.5},
        {"iat": False},
        {"jti": {"id": 1}},
    ],
)
def test_standard_claims_wrong_type(body):
    with pytest.raises(TokenDecodeError) as exc_info:
        decode(standard_claims_decoder, make_token(body))
    assert next(iter(body)) in exc_info.value.detail


# --- pydantic ----------------------------------------------------------------


class AppClaims(BaseModel):
    sub: str
    exp: int
    roles: List[str] = []


def test_pydantic_claims():
    token = make_token({"sub": "u1", "exp": 1000000000, "roles": ["admin"]})
    claims = decode(pydantic_claims(AppClaims), token)

    assert claims == AppClaims(sub="u1", exp=1000000000, roles=["admin"])


def test_pydantic_claims_validation_error():
    with pytest.raises(TokenDecodeError) as exc_info:
        decode(pydantic_claims(AppClaims), make_token({"sub": "u1"}))
    assert "exp" in exc_info.value.detail


# --- out-of-range values -----------------------------------------------------


@pytest.mark.parametrize("claim", ["exp", "nbf", "iat"])
@pytest.mark.parametrize("seconds", [253402300800, -62135596801, 10 ** 30])
def test_standard_claims_timestamp_out_of_range(claim, seconds):
    with pytest.raises(TokenDecodeError) as exc_info:
        decode(standard_claims_decoder, make_token({"sub": "u1", claim: seconds}))
    assert claim in exc_info.value.detail
    assert "out of range" in exc_info.value.detail


def test_timestamp_field_out_of_range():
    with pytest.raises(ClaimDecodeError):
        timestamp_field(253402300800)

    # last second datetime can hold
    assert timestamp_field(253402300799) == datetime(9999, 12, 31, 23, 59, 59, tzinfo=timezone.utc)


def test_standard_claims_huge_integer_literal():
    body = '{"exp": ' + "9" * 400 + "}"
    with pytest.raises(TokenDecodeError):
        decode(standard_claims_decoder, make_token(body))


def test_optional_field_null_means_absent():
    assert standard_claims_decoder('{"sub": null, "exp": null, "aud": null}') == StandardClaims()

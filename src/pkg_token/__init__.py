"""
pkg_token

Signature-agnostic decoding core for compact JWTs: split the token,
base64url-decode its body, parse the body into a claim shape of your
choice and check expiry. Framework glue (FastAPI, httpx, requests) lives
under `pkg_token.integrations`.
"""

__version__ = "0.1.0"

from .domain.constants import AuthStatus, ClaimName, DecodeErrorKind
from .domain.entities import StandardClaims
from .domain.exceptions import (
    AuthenticationError,
    ClaimDecodeError,
    TokenError,
    TokenExpiredError,
    TokenProcessingError,
    TokenDecodeError,
)
from .domain.ports import AuthBackend, ClaimDecoder
from .domain.value_objects import TokenSegments, timestamp_from_millis, to_millis

from .adapters.claims import (
    field,
    integer,
    json_object_decoder,
    optional_field,
    pydantic_claims,
    standard_claims_decoder,
    string,
    timestamp_field,
)
from .application.use_cases.decode_token import decode, extract_token_body
from .application.use_cases.check_expiry import is_expired
from .application.use_cases.authenticate import AuthenticateTokenUseCase

from .settings import TokenSettings, settings_from_env

__all__ = [
    "__version__",
    # domain core
    "AuthStatus",
    "ClaimName",
    "DecodeErrorKind",
    "StandardClaims",
    "TokenSegments",
    "timestamp_from_millis",
    "to_millis",
    "AuthBackend",
    "ClaimDecoder",
    # exceptions
    "AuthenticationError",
    "ClaimDecodeError",
    "TokenError",
    "TokenExpiredError",
    "TokenProcessingError",
    "TokenDecodeError",
    # claim decoders
    "field",
    "integer",
    "json_object_decoder",
    "optional_field",
    "pydantic_claims",
    "standard_claims_decoder",
    "string",
    "timestamp_field",
    # use cases
    "decode",
    "extract_token_body",
    "is_expired",
    "AuthenticateTokenUseCase",
    # config
    "TokenSettings",
    "settings_from_env",
]

from __future__ import annotations

from datetime import datetime

from .decode_token import decode
from ...adapters.claims.fields import field, integer, json_object_decoder
from ...domain.constants import ClaimName
from ...domain.exceptions import TokenError
from ...domain.value_objects import to_millis

_expiry_decoder = json_object_decoder(field(ClaimName.EXPIRES_AT.value, integer))


def is_expired(now: datetime, token: str) -> bool:
    """
    True when `now` is strictly past the token's `exp` claim.

    Fail-closed: a token whose `exp` cannot be read (malformed token,
    missing or non-integer `exp`) counts as expired. This cannot tell
    "no expiry" apart from "garbage" or "really expired"; callers that
    need the difference should use `decode` directly.
    """
    try:
        exp = decode(_expiry_decoder, token)
    except TokenError:
        return True

    return to_millis(now) > exp * 1000

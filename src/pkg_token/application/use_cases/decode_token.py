from __future__ import annotations

import logging
from typing import TypeVar

from ...adapters.segments import decode_body, normalize_body, split_token
from ...domain.exceptions import TokenDecodeError
from ...domain.ports import ClaimDecoder

logger = logging.getLogger(__name__)

T = TypeVar("T")


def extract_token_body(token: str) -> str:
    """
    Return the decoded body (JSON text) of a compact token.

    Signature is NOT verified and the body is not parsed.

    Raises:
        TokenProcessingError: wrong segment count, wrong body length,
            invalid base64 or non UTF-8 body.
    """
    segments = split_token(token)
    return decode_body(normalize_body(segments.body))


def decode(claim_decoder: ClaimDecoder[T], token: str) -> T:
    """
    Decode the body of `token` into the claim shape produced by
    `claim_decoder`.

    Steps run in order and the first failure propagates untouched:
      1. split into three segments
      2. normalize + base64-decode the body
      3. apply `claim_decoder` to the body text

    Raises:
        TokenProcessingError: steps 1-2 failed
        TokenDecodeError: the body did not fit the claim shape
    """
    body = extract_token_body(token)

    try:
        return claim_decoder(body)
    except (ValueError, TypeError, KeyError, RecursionError) as exc:
        # ClaimDecodeError, JSONDecodeError and pydantic errors are ValueErrors;
        # RecursionError comes from deeply nested JSON
        detail = str(exc)
        logger.debug("Token body does not match claim shape: %s", detail)
        raise TokenDecodeError(detail) from exc

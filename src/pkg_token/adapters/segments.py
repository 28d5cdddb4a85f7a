import base64
import logging

from ..domain.exceptions import TokenProcessingError
from ..domain.value_objects import TokenSegments

logger = logging.getLogger(__name__)

# base64url -> standard base64 alphabet
_URL_SAFE_TO_STANDARD = str.maketrans({"-": "+", "_": "/"})

# len % 4 -> padding to append; remainder 1 can never be valid base64
_PADDING = {0: "", 2: "==", 3: "="}


def split_token(token: str) -> TokenSegments:
    """
    Split a compact token into header, body and signature.

    Raises:
        TokenProcessingError: unless there are exactly two dots.
    """
    parts = token.split(".")
    if len(parts) != 3:
        logger.debug("Token has %d segments, expected 3", len(parts))
        raise TokenProcessingError("Token has invalid shape")

    header, body, signature = parts
    return TokenSegments(header=header, body=body, signature=signature)


def normalize_body(segment: str) -> str:
    """
    Rewrite a base64url segment into padded standard base64.

    Always applied, also to segments that already carry `=` padding.

    Raises:
        TokenProcessingError("Wrong length") when len % 4 == 1.
    """
    normalized = segment.translate(_URL_SAFE_TO_STANDARD)
    padding = _PADDING.get(len(normalized) % 4)
    if padding is None:
        raise TokenProcessingError("Wrong length")
    return normalized + padding


def decode_body(normalized: str) -> str:
    """
    Decode padded standard base64 into UTF-8 text.

    Raises:
        TokenProcessingError carrying the underlying codec message.
    """
    try:
        raw = base64.b64decode(normalized, validate=True)
        return raw.decode("utf-8")
    except ValueError as exc:
        # binascii.Error, UnicodeDecodeError and non-ASCII input all land here
        logger.debug("Token body is not valid base64 text: %s", exc)
        raise TokenProcessingError(str(exc)) from exc

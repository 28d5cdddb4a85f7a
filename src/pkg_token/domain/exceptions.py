from .constants import DecodeErrorKind


class AuthenticationError(Exception):
    """Raised when authentication fails."""
    pass


class TokenError(AuthenticationError):
    """
    Base for the three token decode failures.

    `kind` lets callers branch on the failure without isinstance chains,
    `detail` carries the human-readable reason.
    """
    kind: DecodeErrorKind

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenError):
            return NotImplemented
        return self.kind is other.kind and self.detail == other.detail

    def __hash__(self) -> int:
        return hash((self.kind, self.detail))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.detail!r})"


class TokenExpiredError(TokenError):
    """Raised when token has expired."""
    kind = DecodeErrorKind.EXPIRED


class TokenProcessingError(TokenError):
    """Raised when token is structurally malformed or not valid base64."""
    kind = DecodeErrorKind.PROCESSING


class TokenDecodeError(TokenError):
    """Raised when the token body does not match the requested claim shape."""
    kind = DecodeErrorKind.DECODE


class ClaimDecodeError(ValueError):
    """Raised by claim field decoders on a missing or mistyped field."""
    pass

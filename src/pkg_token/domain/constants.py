from enum import Enum


class ClaimName(Enum):
    SUBJECT = "sub"
    ISSUER = "iss"
    AUDIENCE = "aud"
    EXPIRES_AT = "exp"
    NOT_BEFORE = "nbf"
    ISSUED_AT = "iat"
    TOKEN_ID = "jti"


class DecodeErrorKind(Enum):
    EXPIRED = "expired"
    PROCESSING = "processing"
    DECODE = "decode"


class AuthStatus(Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"
    EXPIRED = "expired"
    INVALID = "invalid"

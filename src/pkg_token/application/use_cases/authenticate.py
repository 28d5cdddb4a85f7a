from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Generic, Optional, TypeVar

from .check_expiry import is_expired
from .decode_token import decode
from ...adapters.claims.standard import standard_claims_decoder
from ...domain.constants import AuthStatus
from ...domain.entities import StandardClaims
from ...domain.exceptions import TokenError, TokenExpiredError
from ...domain.ports import ClaimDecoder

T = TypeVar("T")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class AuthenticateTokenUseCase(Generic[T]):
    """
    Application use case:
    - Decode a token's claims via a ClaimDecoder
    - Reject it when its `exp` has passed

    Signature is NOT verified; pair this with your own verifier when the
    token does not come from a trusted channel.

    `clock` is consulted on every call, nothing is cached between calls.
    """

    claim_decoder: ClaimDecoder[T] = standard_claims_decoder  # type: ignore[assignment]
    clock: Callable[[], datetime] = field(default=utc_now)

    def execute(self, token: str) -> T:
        """
        Decode a token and return its claims.

        Raises:
            TokenProcessingError
            TokenDecodeError
            TokenExpiredError
        """
        claims = decode(self.claim_decoder, token)

        if is_expired(self.clock(), token):
            raise TokenExpiredError("Token has expired")

        return claims

    def status(self, token: Optional[str]) -> AuthStatus:
        """
        Classify a (possibly absent) token for an authentication lifecycle.
        """
        if not token:
            return AuthStatus.ANONYMOUS

        try:
            self.execute(token)
        except TokenExpiredError:
            return AuthStatus.EXPIRED
        except TokenError:
            return AuthStatus.INVALID

        return AuthStatus.AUTHENTICATED


def standard_authenticator(
        clock: Callable[[], datetime] = utc_now,
) -> AuthenticateTokenUseCase[StandardClaims]:
    return AuthenticateTokenUseCase(claim_decoder=standard_claims_decoder, clock=clock)

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Optional

from .deps import FastAPITokenAuth
from .security import bearer_scheme, extract_token_from_request
from ...adapters.claims.standard import standard_claims_decoder
from ...application.use_cases.authenticate import AuthenticateTokenUseCase, utc_now
from ...domain.ports import ClaimDecoder
from ...settings import TokenSettings


def create_fastapi_token_auth(
    *,
    claim_decoder: ClaimDecoder[Any] = standard_claims_decoder,
    settings: Optional[TokenSettings] = None,
    clock: Callable[[], datetime] = utc_now,
) -> FastAPITokenAuth:
    """
    High-level helper for FastAPI apps:

        token_auth = create_fastapi_token_auth()

        @app.get("/me")
        async def me(claims: StandardClaims = Depends(token_auth.get_claims)):
            return {"sub": claims.subject}
    """
    authenticator = AuthenticateTokenUseCase(claim_decoder=claim_decoder, clock=clock)
    return FastAPITokenAuth(authenticator=authenticator, settings=settings or TokenSettings())


__all__ = [
    "FastAPITokenAuth",
    "bearer_scheme",
    "create_fastapi_token_auth",
    "extract_token_from_request",
]

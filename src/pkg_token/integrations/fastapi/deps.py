from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials

from .security import bearer_scheme, extract_token_from_request
from ...application.use_cases.authenticate import AuthenticateTokenUseCase
from ...domain.exceptions import TokenError, TokenExpiredError
from ...settings import TokenSettings


@dataclass(slots=True)
class FastAPITokenAuth:
    """
    FastAPI integration for pkg_token.

    Decodes the request's token into claims and rejects expired ones.
    Signatures are NOT verified: only use behind a gateway that already did.
    """

    authenticator: AuthenticateTokenUseCase[Any]
    settings: TokenSettings = field(default_factory=TokenSettings)

    async def get_claims(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Any:
        """Dependency: require a decodable, unexpired token."""
        token = extract_token_from_request(request, credentials, self.settings)
        try:
            return self.authenticator.execute(token)
        except TokenExpiredError as exc:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Token expired",
            ) from exc
        except TokenError as exc:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=exc.detail,
            ) from exc

    async def get_optional_claims(
            self,
            request: Request,
            credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    ) -> Optional[Any]:
        """Dependency: claims, or None for a missing/bad/expired token."""
        try:
            token = extract_token_from_request(request, credentials, self.settings)
        except HTTPException:
            # no token anywhere -> anonymous
            return None

        try:
            return self.authenticator.execute(token)
        except TokenError:
            return None

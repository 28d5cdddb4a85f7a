from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ...settings import TokenSettings

# Expose this so apps can plug it into dependencies if they want OpenAPI security
bearer_scheme = HTTPBearer(auto_error=False)


def extract_token_from_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = None,
    settings: Optional[TokenSettings] = None,
) -> str:
    """
    Extract an access token from either:

      1. HTTP Bearer auth header (preferred)
      2. The configured header with the configured scheme
      3. A cookie (e.g. 'access_token')

    Raises HTTPException(401) if no token is found.
    """
    s = settings or TokenSettings()

    # 1) Prefer the HTTPBearer credentials if provided
    if credentials is not None:
        token = (credentials.credentials or "").strip()
        if token:
            return token

    # 2) Fallback to raw header (custom header name / scheme)
    auth_header = request.headers.get(s.header_name)
    if auth_header and auth_header.startswith(s.scheme_prefix):
        token = auth_header.removeprefix(s.scheme_prefix).strip()
        if token:
            return token

    # 3) Fallback to cookie
    cookie_token = request.cookies.get(s.cookie_name)
    if cookie_token:
        return cookie_token

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
    )

"""
Attach bearer tokens to outgoing HTTP requests (httpx and requests).

With `refuse_expired=True` an expired token is never sent: the request
fails locally with TokenExpiredError so the caller can refresh first.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Dict, Generator, Optional

import httpx
import requests
from requests.auth import AuthBase

from ..application.use_cases.authenticate import utc_now
from ..application.use_cases.check_expiry import is_expired
from ..domain.exceptions import TokenExpiredError
from ..settings import TokenSettings

logger = logging.getLogger(__name__)


def bearer_headers(token: str, settings: Optional[TokenSettings] = None) -> Dict[str, str]:
    s = settings or TokenSettings()
    return {s.header_name: f"{s.scheme_prefix}{token}"}


def _ensure_not_expired(token: str, clock: Callable[[], datetime]) -> None:
    if is_expired(clock(), token):
        logger.debug("Refusing to send expired token")
        raise TokenExpiredError("Token has expired")


class HttpxBearerAuth(httpx.Auth):
    """
    httpx auth flow:

        client = httpx.Client(auth=HttpxBearerAuth(token, refuse_expired=True))
    """

    def __init__(
        self,
        token: str,
        settings: Optional[TokenSettings] = None,
        *,
        refuse_expired: bool = False,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._token = token
        self._settings = settings or TokenSettings()
        self._refuse_expired = refuse_expired
        self._clock = clock

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if self._refuse_expired:
            _ensure_not_expired(self._token, self._clock)
        request.headers.update(bearer_headers(self._token, self._settings))
        yield request


class RequestsBearerAuth(AuthBase):
    """
    requests auth hook:

        session.auth = RequestsBearerAuth(token)
    """

    def __init__(
        self,
        token: str,
        settings: Optional[TokenSettings] = None,
        *,
        refuse_expired: bool = False,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._token = token
        self._settings = settings or TokenSettings()
        self._refuse_expired = refuse_expired
        self._clock = clock

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        if self._refuse_expired:
            _ensure_not_expired(self._token, self._clock)
        request.headers.update(bearer_headers(self._token, self._settings))
        return request

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(slots=True)
class TokenSettings:
    """
    Where tokens travel in HTTP requests.

    Host code decides how to construct this (env, config file, etc.).
    """
    cookie_name: str = "access_token"
    auth_scheme: str = "Bearer"
    header_name: str = "Authorization"

    @property
    def scheme_prefix(self) -> str:
        return f"{self.auth_scheme} "


def settings_from_env() -> TokenSettings:
    """
    Build TokenSettings from PKG_TOKEN_* variables; unset ones keep defaults.
    """
    defaults = TokenSettings()
    values = {}
    blank = []
    for attr, key in (
            ("cookie_name", "PKG_TOKEN_COOKIE_NAME"),
            ("auth_scheme", "PKG_TOKEN_AUTH_SCHEME"),
            ("header_name", "PKG_TOKEN_HEADER_NAME"),
    ):
        raw = os.getenv(key)
        if raw is None:
            values[attr] = getattr(defaults, attr)
        elif not raw.strip():
            blank.append(key)
        else:
            values[attr] = raw.strip()

    if blank:
        raise RuntimeError(f"Blank token settings: {', '.join(blank)}")

    return TokenSettings(**values)

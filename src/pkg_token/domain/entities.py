from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple, Union

Audience = Union[str, Tuple[str, ...]]


@dataclass(frozen=True, slots=True)
class StandardClaims:
    """
    Registered JWT claims (RFC 7519 section 4.1).

    Every field is optional: a claim missing from the token body is None.
    Time claims are aware UTC datetimes.
    """
    subject: Optional[str] = None
    issuer: Optional[str] = None
    audience: Optional[Audience] = None
    expires_at: Optional[datetime] = None
    not_before: Optional[datetime] = None
    issued_at: Optional[datetime] = None
    token_id: Optional[str] = None

    @property
    def audiences(self) -> Tuple[str, ...]:
        if self.audience is None:
            return ()
        if isinstance(self.audience, str):
            return (self.audience,)
        return self.audience

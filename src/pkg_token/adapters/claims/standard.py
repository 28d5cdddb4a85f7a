from typing import Any, Mapping

from .fields import audience, json_object_decoder, optional_field, string, timestamp_field
from ...domain.constants import ClaimName
from ...domain.entities import StandardClaims

_subject = optional_field(ClaimName.SUBJECT.value, string)
_issuer = optional_field(ClaimName.ISSUER.value, string)
_audience = optional_field(ClaimName.AUDIENCE.value, audience)
_expires_at = optional_field(ClaimName.EXPIRES_AT.value, timestamp_field)
_not_before = optional_field(ClaimName.NOT_BEFORE.value, timestamp_field)
_issued_at = optional_field(ClaimName.ISSUED_AT.value, timestamp_field)
_token_id = optional_field(ClaimName.TOKEN_ID.value, string)


def _build_standard_claims(obj: Mapping[str, Any]) -> StandardClaims:
    return StandardClaims(
        subject=_subject(obj),
        issuer=_issuer(obj),
        audience=_audience(obj),
        expires_at=_expires_at(obj),
        not_before=_not_before(obj),
        issued_at=_issued_at(obj),
        token_id=_token_id(obj),
    )


standard_claims_decoder = json_object_decoder(_build_standard_claims)

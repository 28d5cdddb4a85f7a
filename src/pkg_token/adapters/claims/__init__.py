from .fields import (
    FieldDecoder,
    audience,
    field,
    integer,
    json_object_decoder,
    optional_field,
    string,
    timestamp_field,
)
from .pydantic_model import pydantic_claims
from .standard import standard_claims_decoder

__all__ = [
    "FieldDecoder",
    "audience",
    "field",
    "integer",
    "json_object_decoder",
    "optional_field",
    "string",
    "timestamp_field",
    "pydantic_claims",
    "standard_claims_decoder",
]

from __future__ import annotations

from typing import Callable, Type, TypeVar

from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


def pydantic_claims(model: Type[M]) -> Callable[[str], M]:
    """
    Use a pydantic model as the claim shape:

        class MyClaims(BaseModel):
            sub: str
            roles: list[str] = []

        claims = decode(pydantic_claims(MyClaims), token)

    pydantic's ValidationError (a ValueError) surfaces as TokenDecodeError.
    """

    def _decode(body: str) -> M:
        return model.model_validate_json(body)

    return _decode

from __future__ import annotations

from typing import Protocol, Tuple, TypeVar

T_co = TypeVar("T_co", covariant=True)

ConfigT = TypeVar("ConfigT", contravariant=True)
ModelT = TypeVar("ModelT")
MessageT = TypeVar("MessageT", contravariant=True)
ChallengeT = TypeVar("ChallengeT", contravariant=True)
StatusT = TypeVar("StatusT", covariant=True)


class ClaimDecoder(Protocol[T_co]):
    """
    Port for turning a decoded token body (JSON text) into a claim shape.

    Any callable `str -> T` qualifies. Implementations signal a mismatch
    by raising ValueError (json.JSONDecodeError, pydantic's
    ValidationError and ClaimDecodeError all are), TypeError or KeyError.
    """

    def __call__(self, body: str) -> T_co:
        ...


class AuthBackend(Protocol[ConfigT, ModelT, MessageT, ChallengeT, StatusT]):
    """
    Port for an authentication lifecycle (login, logout, refresh, challenge).

    Implementations live in the host application; this package only
    supplies the token decoding they build on. `Model` is the backend's
    own state, threaded through every call and returned updated.
    """

    def login(self, config: ConfigT, model: ModelT) -> ModelT:
        ...

    def logout(self, config: ConfigT, model: ModelT) -> ModelT:
        ...

    def refresh(self, config: ConfigT, model: ModelT) -> ModelT:
        ...

    def update(self, message: MessageT, model: ModelT) -> ModelT:
        ...

    def handle_challenge(self, challenge: ChallengeT, model: ModelT) -> Tuple[ModelT, bool]:
        """Returns the new model and whether the challenge was consumed."""
        ...

    def status(self, model: ModelT) -> StatusT:
        ...

"""Tagged results used inside the request and decoding pipeline."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from instagram_api.errors import FailureKind, InstagramAPIError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class DecodeError:
    """Why a raw value could not be turned into an entity."""

    reason: str

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class RequestFailure:
    error: InstagramAPIError

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> FailureKind:
        return self.error.kind


DecodeResult = Union[Ok[T], DecodeError]
DispatchResult = Union[Ok[T], RequestFailure]

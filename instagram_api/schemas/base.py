"""
Entity decode contract shared by every Instagram domain object.

Each entity is a pydantic model that can be built from one raw JSON value
(``try_decode``) without ever raising. ``decode`` returns the tagged form so
callers that want the reason can log it.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from instagram_api.results import DecodeError, DecodeResult, Ok

ModelT = TypeVar("ModelT", bound="InstagramModel")


def _summarize(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors()[:3]:
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid')}")
    if exc.error_count() > 3:
        parts.append(f"... {exc.error_count() - 3} more")
    return "; ".join(parts)


class InstagramModel(BaseModel):
    # The API adds fields over time and sends numeric ids in places
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @classmethod
    def decode(cls: type[ModelT], raw: Any) -> DecodeResult[ModelT]:
        if not isinstance(raw, dict):
            return DecodeError(f"expected a JSON object, got {type(raw).__name__}")
        try:
            return Ok(cls.model_validate(raw))
        except ValidationError as exc:
            return DecodeError(_summarize(exc))
        except RecursionError:
            return DecodeError("value is nested too deeply")

    @classmethod
    def try_decode(cls: type[ModelT], raw: Any) -> ModelT | None:
        result = cls.decode(raw)
        if isinstance(result, Ok):
            return result.value
        return None

    def to_raw(self) -> dict:
        """Wire representation, the inverse of ``decode``."""
        return self.model_dump(by_alias=True, exclude_none=True)

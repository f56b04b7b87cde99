"""
Collection decoding.

``decode_many`` turns an array payload into a list of entities. By default
elements that fail to decode are dropped and the rest are kept in order, so a
partially malformed response still yields its good entries. ``strict=True``
makes any element failure fail the whole collection instead.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from instagram_api.errors import ElementDecodeFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


def decode_many(
    payload: Any,
    decode_one: Callable[[Any], T | None],
    *,
    strict: bool = False,
) -> list[T] | None:
    """Apply ``decode_one`` to every element of ``payload``.

    Returns ``None`` when ``payload`` is not a list, or, in strict mode, when
    any element fails. Otherwise returns the decoded elements in input order.
    """
    if not isinstance(payload, list):
        logger.warning("Expected an array payload, got %s", type(payload).__name__)
        return None

    decoded: list[T] = []
    for index, element in enumerate(payload):
        item = decode_one(element)
        if item is None:
            failure = ElementDecodeFailure(
                f"element {index} of {len(payload)} did not decode", index=index
            )
            if strict:
                logger.warning("Rejecting collection: %s", failure)
                return None
            logger.debug("Dropping %s", failure)
            continue
        decoded.append(item)
    return decoded

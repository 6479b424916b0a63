from __future__ import annotations

from typing import Type, TypeVar

import structlog
from pydantic import BaseModel, ValidationError

from ...domain.exceptions import DecodingError

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def serialize(payload: BaseModel) -> str:
    """
    Encode a wire model as JSON using the wire key names.

    Fields left as None are omitted rather than sent as null.
    """
    return payload.model_dump_json(by_alias=True, exclude_none=True)


def deserialize(text: str | bytes, shape: Type[M]) -> M:
    """
    Parse wire JSON into `shape`.

    Raises:
        DecodingError if `text` is not JSON or does not fit `shape`.
    """
    try:
        return shape.model_validate_json(text)
    except ValidationError as exc:
        logger.debug(
            "Wire body did not match expected shape",
            shape=shape.__name__,
            errors=exc.error_count(),
        )
        raise DecodingError(f"Cannot decode {shape.__name__}: {exc}") from exc

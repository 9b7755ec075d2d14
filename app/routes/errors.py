"""
Translation of protocol results into HTTP responses.
"""
from __future__ import annotations

from typing import TypeVar

from fastapi import HTTPException, status

from app.core.result import Err, ErrorKind, Result
from app.schemas.protocol_schema import ErrorDetail


T = TypeVar("T")

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.OWNER_ONLY: status.HTTP_403_FORBIDDEN,
}


def protocol_error(err: Err, message: str) -> HTTPException:
    """Build the HTTPException for a domain error kind."""
    return HTTPException(
        status_code=_STATUS_BY_KIND[err.kind],
        detail=ErrorDetail(error=err.error, message=message).to_dict(),
    )


def unwrap(result: Result[T], message: str) -> T:
    """
    Return the value of an `Ok`, or raise the matching HTTPException.

    Args:
        result: Outcome of a protocol operation.
        message: Human-readable context used if the result is an error.
    """
    if isinstance(result, Err):
        raise protocol_error(result, message)
    return result.value


__all__ = ["protocol_error", "unwrap"]

"""
FastAPI dependencies shared by the protocol routers.

- The process-wide `Protocol` instance, built lazily on first use
- The caller identity, resolved upstream and passed in a request header

Tests replace both through `app.dependency_overrides`.
"""
from __future__ import annotations

import threading
from typing import Optional

from fastapi import Header, HTTPException, status

from app.core.config import CALLER_HEADER
from app.services.protocol import Protocol, build_protocol


_CURRENT_PROTOCOL: Optional[Protocol] = None
_init_lock = threading.Lock()


def get_protocol() -> Protocol:
    """Return the process protocol instance, building it on first call."""
    global _CURRENT_PROTOCOL
    if _CURRENT_PROTOCOL is None:
        with _init_lock:
            if _CURRENT_PROTOCOL is None:
                _CURRENT_PROTOCOL = build_protocol()
    return _CURRENT_PROTOCOL


def get_caller(caller: Optional[str] = Header(None, alias=CALLER_HEADER)) -> str:
    """
    Resolve the caller identity for a mutating request.

    Raises:
        HTTPException: 401 if the header is missing or blank.
    """
    if caller is None or not caller.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"{CALLER_HEADER} header is required",
        )
    return caller.strip()


__all__ = ["get_protocol", "get_caller"]

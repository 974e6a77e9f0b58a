from __future__ import annotations

from fastapi import HTTPException


class PolylineError(ValueError):
    """Base class for every failure raised by the codec and its services."""


class InvalidInput(PolylineError):
    """Wrong argument type or shape (non-string polyline, bad precision, bad point)."""


class MalformedEncoding(PolylineError):
    """Encoded text that cannot be a polyline (truncated varint, stray byte)."""


def bad_request(code: str, message: str):
    raise HTTPException(status_code=400, detail={"code": code, "message": message})


def raise_http(e: PolylineError):
    if isinstance(e, MalformedEncoding):
        bad_request("malformed_encoding", str(e))
    bad_request("invalid_input", str(e))

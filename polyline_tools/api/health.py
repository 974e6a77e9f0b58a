from __future__ import annotations

from fastapi import APIRouter

from polyline_tools.core.polyline import ENCODE_PRECISION
from polyline_tools.core.settings import settings

router = APIRouter()


@router.get("/health")
def health():
    return {
        "ok": True,
        "encode_precision": ENCODE_PRECISION,
        "decode_precision": settings.polyline_precision,
    }

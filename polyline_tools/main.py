# polyline_tools/main.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import orjson
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.gzip import GZipMiddleware

# Load <repo>/.env (main.py is <repo>/polyline_tools/main.py)
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

from polyline_tools.core.settings import settings
from polyline_tools.api import api_router

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


class OrjsonResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return orjson.dumps(content, option=orjson.OPT_NON_STR_KEYS)


app = FastAPI(
    title="Polyline Tools",
    version="1.0.0",
    default_response_class=OrjsonResponse,
)

# ── Compression (must be added before CORS) ──
app.add_middleware(GZipMiddleware, minimum_size=1000)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(api_router)

logger.info(
    f"[app] Polyline Tools ready (decode precision={settings.polyline_precision}, "
    f"earth radius={settings.earth_radius_km} km)"
)

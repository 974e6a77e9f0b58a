from __future__ import annotations

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from polyline_tools.core.haversine import EARTH_RADIUS_KM
from polyline_tools.core.polyline import DEFAULT_PRECISION


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    # Codec
    polyline_precision: int = Field(default=DEFAULT_PRECISION, ge=0, alias="POLYLINE_PRECISION")

    # Distance
    earth_radius_km: float = Field(default=EARTH_RADIUS_KM, gt=0, alias="EARTH_RADIUS_KM")

    # API guards
    max_merge_polylines: int = Field(default=500, ge=1, alias="MAX_MERGE_POLYLINES")

    # Service
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_origins: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000",
        alias="CORS_ORIGINS",
    )

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()

"""Application configuration via Pydantic Settings.

Every setting maps to an explicit environment variable name so a typo in
.env is not silently ignored in favour of a differently-cased field.
"""

from pydantic import Field
from pydantic_settings import BaseSettings

OSM_TILE_URL = "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)


class Settings(BaseSettings):
    # App
    app_title: str = Field(
        default="Isoband — approximate isochrone bands",
        validation_alias="APP_TITLE",
    )
    debug: bool = Field(default=False, validation_alias="DEBUG")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    cors_origins: list[str] = Field(default=["*"], validation_alias="CORS_ORIGINS")

    # Map widget
    initial_latitude: float = Field(default=48.8566, ge=-90, le=90, validation_alias="INITIAL_LATITUDE")
    initial_longitude: float = Field(default=2.3522, ge=-180, le=180, validation_alias="INITIAL_LONGITUDE")
    initial_zoom: int = Field(default=6, ge=0, le=19, validation_alias="INITIAL_ZOOM")
    tile_url: str = Field(default=OSM_TILE_URL, validation_alias="TILE_URL")
    tile_attribution: str = Field(default=OSM_ATTRIBUTION, validation_alias="TILE_ATTRIBUTION")
    fit_padding_px: int = Field(default=50, ge=0, validation_alias="FIT_PADDING_PX")

    # Band geometry
    settle_delay_ms: int = Field(default=100, ge=0, validation_alias="SETTLE_DELAY_MS")
    polygon_vertices: int = Field(default=16, ge=3, validation_alias="POLYGON_VERTICES")
    polygon_irregularity: float = Field(default=0.35, ge=0, lt=1, validation_alias="POLYGON_IRREGULARITY")
    random_seed: int | None = Field(default=None, validation_alias="RANDOM_SEED")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()

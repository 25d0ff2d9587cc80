"""Request/response models for the HTTP API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class PointRequest(BaseModel):
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class ViewRequest(PointRequest):
    zoom: int = Field(..., ge=0, le=19)


class ModeRequest(BaseModel):
    mode: Literal["distance", "time"] | None = Field(
        None, description="Active entry mode; anything missing falls back to time"
    )


class GenerateRequest(BaseModel):
    """Form fields as typed. Numbers may arrive as strings."""

    location: str = Field("", description="Named location, e.g. 'Eiffel Tower'")
    mode: Literal["distance", "time"] | None = None
    distance_value: str | float | None = Field(None, description="Total distance (km)")
    time_value: str | float | None = Field(None, description="Total time (minutes)")
    num_bands: str | float | None = Field(None, description="Number of bands, 1-10")

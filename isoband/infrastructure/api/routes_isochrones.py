"""Isochrone endpoints — generate, clear, switch entry mode."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from isoband.adapters.ui.web_panel import WebControlPanel
from isoband.application.use_cases.isochrone_controller import (
    GenerationForm,
    GenerationOutcome,
    IsochroneController,
)
from isoband.domain.entities.band import BandSpec
from isoband.infrastructure.api.dependencies import get_controller, get_panel
from isoband.infrastructure.api.schemas import GenerateRequest, ModeRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["isochrones"])


@router.post("/isochrones")
async def generate_isochrones(
    payload: GenerateRequest,
    controller: IsochroneController = Depends(get_controller),
):
    """Press Generate with the given form values."""
    outcome = await controller.handle_generate(
        GenerationForm(
            location_name=payload.location,
            mode=payload.mode,
            distance_value=payload.distance_value,
            time_value=payload.time_value,
            num_bands=payload.num_bands,
        )
    )
    if not outcome.ok:
        return JSONResponse(
            status_code=422,
            content={"status": "error", "field": outcome.error_field, "message": outcome.message},
        )
    return _serialize_outcome(outcome)


@router.delete("/isochrones")
async def clear_isochrones(controller: IsochroneController = Depends(get_controller)):
    controller.clear_features()
    return {"status": "ok"}


@router.put("/controls/mode")
async def change_mode(
    payload: ModeRequest,
    controller: IsochroneController = Depends(get_controller),
    panel: WebControlPanel = Depends(get_panel),
):
    """Toggle between distance and time entry controls."""
    active = controller.handle_mode_change(payload.mode)
    return {"status": "ok", "mode": active.value, "panel": panel.snapshot()}


def _serialize_band(b: BandSpec) -> dict:
    return {
        "index": b.index,
        "range_start": b.range_start,
        "range_end": b.range_end,
        "radius_meters": b.radius_meters,
        "color": b.color,
        "polygon": [[p.latitude, p.longitude] for p in b.polygon],
    }


def _serialize_outcome(o: GenerationOutcome) -> dict:
    r = o.resolution
    return {
        "status": "ok",
        "message": o.message,
        "mode": o.mode.value if o.mode else None,
        "center": {
            "latitude": r.center.latitude,
            "longitude": r.center.longitude,
            "label": r.label,
            "source": r.source.value,
            "zoom_hint": r.zoom_hint,
        },
        "bands": [_serialize_band(b) for b in o.bands],
        "legend": [{"color": row.color, "label": row.label} for row in o.legend],
        "outer_extent_km": o.outer_extent_km,
    }

"""Health check endpoint."""

from fastapi import APIRouter, Depends

from isoband.adapters.map.folium_map import FoliumMapWidget
from isoband.application.use_cases.isochrone_controller import IsochroneController
from isoband.infrastructure.api.dependencies import get_controller, get_map_widget

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    map_widget: FoliumMapWidget = Depends(get_map_widget),
    controller: IsochroneController = Depends(get_controller),
):
    """Liveness plus how much is currently drawn."""
    return {
        "status": "ok",
        "layers": len(map_widget.layer_ids),
        "drawn": controller.state.has_drawn_features(),
        "service": "Isoband - approximate isochrone bands",
    }

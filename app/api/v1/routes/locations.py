from fastapi import APIRouter, Depends

from app.api.deps import get_distance_provider
from app.schemas.common import ok
from app.services.google_maps_service import GoogleMapsService

router = APIRouter(tags=["locations"])


@router.get("/locations/suggest")
def suggest_locations(input: str = "", session_token: str = "", language: str = "en", types: str = "",
                      maps: GoogleMapsService = Depends(get_distance_provider)):
    data = maps.suggest_places(input, session_token=session_token, language=language, types=types)
    return ok(data, "Location suggestions retrieved successfully.")

from fastapi import APIRouter, Query

from travel_advisor.models.schemas import Coordinates
from travel_advisor.services.geocoding_service import geocode_address

router = APIRouter()


@router.get("/geocode", response_model=Coordinates)
async def geocode(address: str = Query("", description="Free-text place name")):
    """
    Coordinates for a place name. {"lat": 0, "lon": 0} means nothing was found.
    """
    return await geocode_address(address)

from fastapi import APIRouter
from travel_advisor.api.v1.endpoints import export, fixtures, geocode, travel

api_router = APIRouter()
api_router.include_router(travel.router, tags=["Itinerary Planning"])
api_router.include_router(fixtures.router, tags=["Fixtures"])
api_router.include_router(geocode.router, tags=["Geocoding"])
api_router.include_router(export.router, prefix="/export", tags=["Export"])

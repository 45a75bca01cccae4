from fastapi import APIRouter

from travel_advisor.core.config import settings

router = APIRouter()

@router.get("/health")
def healthcheck():
    # Reports configuration only; never calls out to OpenAI or Mapbox
    return {
        "status": "ok",
        "message": "Travel Advisor backend running",
        "model": settings.OPENAI_MODEL,
        "geocoding": bool(settings.MAPBOX_TOKEN),
    }

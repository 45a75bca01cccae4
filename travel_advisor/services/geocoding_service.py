import logging
from typing import Optional
from urllib.parse import quote

import httpx

from travel_advisor.core.config import settings
from travel_advisor.models.schemas import NOT_FOUND, Coordinates

logger = logging.getLogger(__name__)


async def geocode_address(address: str, client: Optional[httpx.AsyncClient] = None) -> Coordinates:
    """
    Uses Mapbox forward geocoding to find the coordinates of a place name.
    Returns NOT_FOUND (lat=0, lon=0) on any failure instead of raising:
    callers must check `.found` rather than trusting the numbers.
    """
    address = (address or "").strip()
    if not address:
        return NOT_FOUND
    if not settings.MAPBOX_TOKEN:
        logger.warning("MAPBOX_TOKEN is not set; geocoding is disabled")
        return NOT_FOUND

    owns_client = client is None
    client = client or httpx.AsyncClient()
    try:
        response = await client.get(
            f"{settings.MAPBOX_GEOCODING_URL}/{quote(address, safe='')}.json",
            params={"access_token": settings.MAPBOX_TOKEN, "limit": 1},
        )
        response.raise_for_status()  # Raise error for bad responses (4xx, 5xx)
        data = response.json()

        features = data.get("features") or []
        if features:
            # Mapbox centers are [longitude, latitude]
            lon, lat = features[0]["center"][:2]
            return Coordinates(lat=float(lat), lon=float(lon))
        logger.info("No geocoding match for %r", address)
        return NOT_FOUND
    except httpx.HTTPStatusError as e:
        logger.error("HTTP error during geocoding: %s", e.response.status_code)
        return NOT_FOUND
    except httpx.HTTPError as e:
        logger.error("Network error during geocoding: %s", e.__class__.__name__)
        return NOT_FOUND
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        logger.error("Unexpected geocoding response for %r: %s", address, e)
        return NOT_FOUND
    finally:
        if owns_client:
            await client.aclose()

# File: travel_advisor/api/v1/endpoints/travel.py

import logging
from json import JSONDecodeError

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from travel_advisor.api.deps import get_request_router
from travel_advisor.core.errors import ValidationError
from travel_advisor.models.schemas import ErrorResponse
from travel_advisor.services.request_router import INVALID_ACTION, RequestRouter

logger = logging.getLogger(__name__)

router = APIRouter()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post(
    "/travel",
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def travel(request: Request, travel_router: RequestRouter = Depends(get_request_router)):
    """
    Single entry point for generate_itinerary, get_feedback and simulate_bookings.
    """
    try:
        payload = await request.json()
    except (JSONDecodeError, UnicodeDecodeError):
        # Not even an envelope, so there is no action to dispatch
        return error_response(400, INVALID_ACTION)

    try:
        return await travel_router.dispatch(payload)
    except ValidationError as e:
        return error_response(400, str(e))
    except Exception:
        # Upstream details stay in the logs
        logger.exception("Unexpected error in /travel")
        return error_response(500, "Internal server error")

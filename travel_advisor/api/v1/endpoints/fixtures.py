# File: travel_advisor/api/v1/endpoints/fixtures.py
"""
Read-only snapshots of pre-recorded documents, served in place of live
generation calls while developing the client.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from travel_advisor.core.errors import FixtureError
from travel_advisor.services.fixture_service import load_fixture

router = APIRouter()


def _serve(name: str):
    try:
        return load_fixture(name)
    except FixtureError as e:
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.get("/itinerary")
def get_itinerary():
    return _serve("itinerary")


@router.get("/feedback")
def get_feedback():
    return _serve("feedback")


@router.get("/booking")
def get_booking():
    return _serve("booking response")

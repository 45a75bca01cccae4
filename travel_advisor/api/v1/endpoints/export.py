# File: travel_advisor/api/v1/endpoints/export.py

import logging
from json import JSONDecodeError

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError as SchemaValidationError

from travel_advisor.models.schemas import ErrorResponse, ExportRequest
from travel_advisor.services.pdf_export import build_itinerary_pdf, export_filename

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/pdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}, 400: {"model": ErrorResponse}},
)
async def export_pdf(request: Request):
    """
    Printable itinerary + booking confirmation, downloaded as an attachment.
    """
    try:
        body = ExportRequest.model_validate(await request.json())
    except (JSONDecodeError, UnicodeDecodeError):
        return JSONResponse(status_code=400, content={"error": "Request body must be JSON"})
    except SchemaValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "body"
        return JSONResponse(status_code=400, content={"error": f"{location}: {first['msg']}"})

    pdf_bytes = build_itinerary_pdf(body.itinerary, body.booking_response.bookings)
    filename = export_filename(body.itinerary)
    logger.info("Exported %s (%d bytes)", filename, len(pdf_bytes))
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

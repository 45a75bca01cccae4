import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from travel_advisor.api import healthcheck
from travel_advisor.api.v1.api import api_router
from travel_advisor.core.config import settings
from travel_advisor.core.errors import ValidationError
from travel_advisor.core.logging import configure_logging

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Travel Advisor API",
    description="Generates, revises and books travel itineraries from traveller preferences.",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


# Include the v1 router
app.include_router(api_router, prefix="/api/v1")
app.include_router(healthcheck.router, tags=["Health"])

@app.get("/", tags=["Health"])
def read_root():
    """
    Root endpoint to check if the API is running.
    """
    return {"status": "ok", "message": "Welcome to the Travel Advisor API!"}

# To run the app, in your terminal run:
# uvicorn travel_advisor.main:app --reload

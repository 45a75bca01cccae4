import logging

from travel_advisor.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging once for the service.
    Uvicorn installs its own handlers, so only the level is adjusted when handlers exist.
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level_name, format=LOG_FORMAT)
    root.setLevel(level_name)
    # httpx logs every request at INFO, which would include the Mapbox token in the URL
    logging.getLogger("httpx").setLevel(logging.WARNING)

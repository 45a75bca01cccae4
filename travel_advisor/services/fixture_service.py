import json
import logging
from pathlib import Path
from typing import Any, Optional

from travel_advisor.core.config import settings
from travel_advisor.core.errors import FixtureError

logger = logging.getLogger(__name__)

FIXTURE_FILES = {
    "itinerary": "itinerary.json",
    "feedback": "feedback.json",
    "booking response": "booking-response.json",
}


def fixture_path(name: str, fixtures_dir: Optional[Path] = None) -> Path:
    return Path(fixtures_dir or settings.FIXTURES_DIR) / FIXTURE_FILES[name]


def load_fixture(name: str, fixtures_dir: Optional[Path] = None) -> Any:
    """
    Read and parse one pre-recorded document.
    The file is read on every call so edits show up without a restart.
    """
    path = fixture_path(name, fixtures_dir)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.error("Error reading %s from %s: %s", name, path, e)
        raise FixtureError(f"Failed to read {name}") from e

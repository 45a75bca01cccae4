import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings:
    # OpenAI chat completions (itinerary generation, revision, booking simulation)
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY")
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4-turbo-preview")
    OPENAI_TEMPERATURE: float | None = (
        float(os.getenv("OPENAI_TEMPERATURE")) if os.getenv("OPENAI_TEMPERATURE") else None
    )

    # Mapbox forward geocoding
    MAPBOX_TOKEN: str = os.getenv("MAPBOX_TOKEN", "")
    MAPBOX_GEOCODING_URL: str = os.getenv(
        "MAPBOX_GEOCODING_URL", "https://api.mapbox.com/geocoding/v5/mapbox.places"
    )

    # Pre-recorded itinerary / feedback / booking documents
    FIXTURES_DIR: Path = Path(os.getenv("FIXTURES_DIR", str(PACKAGE_DIR / "fixtures")))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: list[str] = [
        origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
    ]


settings = Settings()

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "local"
    APP_NAME: str = "Taxi Fare API"
    DEBUG: bool = False
    # Comma-separated origins for CORS (e.g. https://bostonairporttaxi.com,https://admin.bostonairporttaxi.com). If empty, uses localhost defaults.
    CORS_ORIGINS: str = ""

    SECRET_KEY: str = "change-me-local-only"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    DATABASE_URL: str = "sqlite:///./taxi.db"

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """Render and others give postgres://; SQLAlchemy expects postgresql+psycopg2://."""
        if v and v.startswith("postgres://"):
            return "postgresql+psycopg2://" + v[11:]
        return v

    # Google Maps (Routes + Places). The active row in google_api_keys wins; this is the fallback.
    GOOGLE_MAPS_API_KEY: str = ""
    GOOGLE_ROUTES_URL: str = "https://routes.googleapis.com/directions/v2:computeRoutes"
    GOOGLE_PLACES_AUTOCOMPLETE_URL: str = "https://maps.googleapis.com/maps/api/place/autocomplete/json"
    DISTANCE_TIMEOUT_SECONDS: float = 10.0

    # False: seat/stop-over amounts from the request are used as-is. True: settings charge x quantity.
    RECOMPUTE_SEAT_CHARGES: bool = False

    # Default admin created by app/seed.py when absent
    SEED_ADMIN_EMAIL: str = "admin@example.com"
    SEED_ADMIN_PASSWORD: str = "admin2025"

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False


settings = Settings()

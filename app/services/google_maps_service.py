import logging
import re

import requests
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import ConfigurationError, UpstreamError, ValidationError
from app.services.fare_calculator import RouteMetrics
from app.services.google_api_key_service import get_latest_active_key

logger = logging.getLogger(__name__)

METERS_PER_MILE = 1609.34
ROUTES_FIELD_MASK = "routes.duration,routes.distanceMeters"
_DURATION_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)s\s*$")


def parse_duration_seconds(value) -> int:
    """Routes API durations look like "1534s"."""
    if isinstance(value, (int, float)):
        return int(value)
    m = _DURATION_RE.match(str(value or ""))
    if not m:
        return 0
    return int(float(m.group(1)))


def format_duration(seconds: int) -> str:
    hours, rem = divmod(max(int(seconds), 0), 3600)
    return "%d Hours %02d Minutes" % (hours, rem // 60)


class GoogleMapsService:
    """Distance and place suggestions from Google, keyed by the active google_api_keys row."""

    def __init__(self, db: Session, timeout: float | None = None):
        self.db = db
        self.timeout = timeout if timeout is not None else settings.DISTANCE_TIMEOUT_SECONDS
        self._api_key: str | None = None

    def api_key(self) -> str:
        if self._api_key is None:
            row = get_latest_active_key(self.db)
            key = row.api_key if row else settings.GOOGLE_MAPS_API_KEY
            if not key:
                raise ConfigurationError("No active Google API key found.")
            self._api_key = key
        return self._api_key

    def get_distance_matrix(self, origin: str, destination: str) -> RouteMetrics:
        body = {
            "origin": {"address": origin},
            "destination": {"address": destination},
            "travelMode": "DRIVE",
            "routingPreference": "TRAFFIC_AWARE",
            "units": "IMPERIAL",
        }
        headers = {
            "Content-Type": "application/json",
            "X-Goog-Api-Key": self.api_key(),
            "X-Goog-FieldMask": ROUTES_FIELD_MASK,
        }
        logger.debug("Routes request origin=%r destination=%r", origin, destination)
        try:
            r = requests.post(settings.GOOGLE_ROUTES_URL, json=body, headers=headers, timeout=self.timeout)
        except requests.Timeout:
            logger.error("Routes request timed out after %ss (origin=%r destination=%r)", self.timeout, origin, destination)
            raise UpstreamError("Distance provider timed out.")
        except requests.RequestException as e:
            logger.error("Routes request failed: %s", e)
            raise UpstreamError("Distance provider request failed.")

        if r.status_code >= 400:
            logger.error("Routes API %s: %s", r.status_code, r.text[:500])
            raise UpstreamError(f"Distance provider returned HTTP {r.status_code}.")
        try:
            data = r.json()
        except ValueError:
            raise UpstreamError("Distance provider returned invalid JSON.")

        routes = data.get("routes") or []
        if not routes:
            logger.error("Routes API returned no route (origin=%r destination=%r)", origin, destination)
            raise UpstreamError("No route found between the given locations.")
        route = routes[0]
        miles = round(float(route.get("distanceMeters") or 0) / METERS_PER_MILE, 2)
        return RouteMetrics(distance=miles, duration=format_duration(parse_duration_seconds(route.get("duration"))))

    def suggest_places(self, text: str, session_token: str = "", language: str = "en", types: str = "") -> list[dict]:
        if not text or len(text.strip()) < 2:
            raise ValidationError(errors={"input": ["Input must be at least 2 characters long."]})
        params = {"input": text, "key": self.api_key(), "sessiontoken": session_token, "language": language}
        if types:
            params["types"] = types
        try:
            r = requests.get(settings.GOOGLE_PLACES_AUTOCOMPLETE_URL, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Places autocomplete failed: %s", e)
            raise UpstreamError("Location provider request failed.")
        try:
            data = r.json()
        except ValueError:
            data = {}
        if r.status_code != 200:
            logger.error("Places API %s: %s", r.status_code, data.get("error_message", "Unknown API error"))
            raise UpstreamError(f"Location provider returned HTTP {r.status_code}.")
        return [
            {
                "place_id": p.get("place_id"),
                "description": p.get("description"),
                "matched_substrings": p.get("matched_substrings") or [],
                "terms": p.get("terms") or [],
            }
            for p in data.get("predictions") or []
        ]

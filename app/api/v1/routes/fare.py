import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.api.deps import get_distance_provider
from app.core.errors import AppError, ConfigurationError, UpstreamError
from app.db.session import get_db
from app.schemas.common import ok
from app.schemas.fare import FareCalculationIn
from app.services.fare_service import quote_fare

logger = logging.getLogger(__name__)

router = APIRouter(tags=["fare"])

GENERIC_FARE_ERROR = "An unexpected error occurred during fare calculation."


def _generic_error() -> JSONResponse:
    return JSONResponse(status_code=500, content={"status": "error", "message": GENERIC_FARE_ERROR})


@router.post("/fare-calculation")
def calculate_fare(body: FareCalculationIn, db: Session = Depends(get_db),
                   distance_provider=Depends(get_distance_provider)):
    request = body.to_request()
    try:
        breakdown = quote_fare(db, request, distance_provider)
    except (ConfigurationError, UpstreamError):
        # Already logged with request context by the fare service.
        return _generic_error()
    except AppError:
        raise
    except Exception:
        logger.exception("Unexpected fare calculation failure")
        return _generic_error()
    return ok(breakdown.to_dict(), "Fare calculated successfully.")

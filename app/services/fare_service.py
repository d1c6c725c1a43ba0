import logging

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import AppError, ConfigurationError, UpstreamError
from app.services import airport_service, car_service, extra_charge_service, settings_service
from app.services.fare_calculator import (
    FareBreakdown,
    FareReferenceData,
    FareRequest,
    SERVICE_FROM_AIRPORT,
    SERVICE_TO_AIRPORT,
    calculate_fare,
    effective_locations,
)

logger = logging.getLogger(__name__)


def quote_fare(db: Session, request: FareRequest, distance_provider) -> FareBreakdown:
    """Resolve reference data in pipeline order and price the trip.

    distance_provider is anything with get_distance_matrix(origin, destination) -> RouteMetrics.
    Any failure aborts the whole quote.
    """
    logger.info(
        "Fare quote start service=%s pickup=%r dropoff=%r airport=%s",
        request.service_type, request.pickup_location, request.dropoff_location, request.airport_id,
    )
    try:
        airport = None
        if request.service_type in (SERVICE_FROM_AIRPORT, SERVICE_TO_AIRPORT):
            airport = airport_service.get_airport_toll(db, request.airport_id)

        origin, destination = effective_locations(request, airport)
        route = distance_provider.get_distance_matrix(origin, destination)

        area_charge = extra_charge_service.find_area_charge(db, destination)

        vehicle = car_service.select_vehicle(db, request.passengers, request.luggage, request.needs_child_seat)

        pricing = settings_service.get_pricing_settings(db)

        reference = FareReferenceData(
            route=route,
            vehicle=vehicle,
            settings=pricing,
            airport=airport,
            area_charge=area_charge,
        )
        breakdown = calculate_fare(request, reference, recompute_seat_charges=settings.RECOMPUTE_SEAT_CHARGES)
    except (ConfigurationError, UpstreamError) as e:
        logger.error("Fare quote failed: %s request=%r", e.message, request)
        raise
    except AppError as e:
        logger.warning("Fare quote rejected: %s", e.message)
        raise

    logger.info(
        "Fare quote done car=%s distance=%.2f total=%.2f",
        breakdown.car_id, breakdown.distance, breakdown.total_fare,
    )
    return breakdown

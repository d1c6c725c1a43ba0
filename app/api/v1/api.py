from fastapi import APIRouter
from app.api.v1.routes.auth import router as auth_router
from app.api.v1.routes.airports import router as airports_router
from app.api.v1.routes.slabs import router as slabs_router
from app.api.v1.routes.cars import router as cars_router
from app.api.v1.routes.tunnel_charges import router as tunnel_charges_router
from app.api.v1.routes.extra_charges import router as extra_charges_router
from app.api.v1.routes.sms_services import router as sms_services_router
from app.api.v1.routes.google_api_keys import router as google_api_keys_router
from app.api.v1.routes.settings import router as settings_router
from app.api.v1.routes.locations import router as locations_router
from app.api.v1.routes.fare import router as fare_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth_router)
api_router.include_router(airports_router)
api_router.include_router(slabs_router)
api_router.include_router(cars_router)
api_router.include_router(tunnel_charges_router)
api_router.include_router(extra_charges_router)
api_router.include_router(sms_services_router)
api_router.include_router(google_api_keys_router)
api_router.include_router(settings_router)
api_router.include_router(locations_router)
api_router.include_router(fare_router)

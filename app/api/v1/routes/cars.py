from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import require_roles
from app.db.session import get_db
from app.models.car import Car
from app.models.user import User
from app.schemas.car import AssignSlabsIn, CarDetailOut, CarIn, CarOut, CarPatch, CarSlabFarePatch
from app.schemas.common import ok
from app.services import car_service
from app.services.car_service import slab_fare_dict
from app.services.crud import get_or_404, list_all

router = APIRouter(tags=["cars"])


def _out(c: Car) -> dict:
    return CarOut.model_validate(c).model_dump(mode="json")


@router.get("/cars")
def list_cars(db: Session = Depends(get_db)):
    return ok([_out(c) for c in list_all(db, Car)], "Cars retrieved successfully.")


@router.get("/cars/{car_id}")
def get_car(car_id: int, db: Session = Depends(get_db)):
    c = get_or_404(db, Car, car_id, "Car")
    detail = CarDetailOut(**_out(c), slab_fares=[slab_fare_dict(f) for f in c.slab_fares])
    return ok(detail.model_dump(mode="json"), "Car retrieved successfully.")


@router.post("/cars", status_code=201)
def create_car(body: CarIn, db: Session = Depends(get_db),
               me: User = Depends(require_roles("admin"))):
    return ok(_out(car_service.create_car(db, body)), "Car created successfully.")


@router.put("/cars/{car_id}")
def update_car(car_id: int, body: CarPatch, db: Session = Depends(get_db),
               me: User = Depends(require_roles("admin"))):
    return ok(_out(car_service.update_car(db, car_id, body)), "Car updated successfully.")


@router.delete("/cars/{car_id}")
def delete_car(car_id: int, db: Session = Depends(get_db),
               me: User = Depends(require_roles("admin"))):
    car_service.delete_car(db, car_id)
    return ok(None, "Car deleted successfully.")


@router.post("/cars/{car_id}/slabs")
def assign_slabs(car_id: int, body: AssignSlabsIn, db: Session = Depends(get_db),
                 me: User = Depends(require_roles("admin"))):
    fares = car_service.assign_slabs(db, car_id, body)
    return ok([slab_fare_dict(f) for f in fares], "Slabs assigned to car successfully.")


@router.put("/cars/{car_id}/slabs/{slab_fare_id}")
def update_slab_fare(car_id: int, slab_fare_id: int, body: CarSlabFarePatch, db: Session = Depends(get_db),
                     me: User = Depends(require_roles("admin"))):
    f = car_service.update_slab_fare(db, car_id, slab_fare_id, body)
    return ok(slab_fare_dict(f), "Car slab fare updated successfully.")


@router.delete("/cars/{car_id}/slabs/{slab_fare_id}")
def delete_slab_fare(car_id: int, slab_fare_id: int, db: Session = Depends(get_db),
                     me: User = Depends(require_roles("admin"))):
    car_service.delete_slab_fare(db, car_id, slab_fare_id)
    return ok(None, "Car slab fare deleted successfully.")

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class CarIn(BaseModel):
    regular_name: str = Field(min_length=1, max_length=100)
    short_name: str = Field("", max_length=50)
    color: Optional[str] = Field(None, max_length=30)
    car_photo: Optional[str] = Field(None, max_length=255)  # stored path or URL
    car_features: Optional[str] = None
    base_fare: float = Field(0.0, ge=0)
    minimum_fare: float = Field(0.0, ge=0)
    small_luggage_capacity: int = Field(0, ge=0)
    large_luggage_capacity: int = Field(0, ge=0)
    extra_luggage_capacity: int = Field(0, ge=0)
    num_of_passengers: int = Field(ge=1)
    is_child_seat: bool = False
    status: int = Field(1, ge=0, le=1)

class CarPatch(BaseModel):
    regular_name: Optional[str] = Field(None, min_length=1, max_length=100)
    short_name: Optional[str] = Field(None, max_length=50)
    color: Optional[str] = Field(None, max_length=30)
    car_photo: Optional[str] = Field(None, max_length=255)
    car_features: Optional[str] = None
    base_fare: Optional[float] = Field(None, ge=0)
    minimum_fare: Optional[float] = Field(None, ge=0)
    small_luggage_capacity: Optional[int] = Field(None, ge=0)
    large_luggage_capacity: Optional[int] = Field(None, ge=0)
    extra_luggage_capacity: Optional[int] = Field(None, ge=0)
    num_of_passengers: Optional[int] = Field(None, ge=1)
    is_child_seat: Optional[bool] = None
    status: Optional[int] = Field(None, ge=0, le=1)

class SlabAssignment(BaseModel):
    slab_id: int
    fare_amount: float = Field(ge=0)
    status: int = Field(1, ge=0, le=1)

class AssignSlabsIn(BaseModel):
    slabs: List[SlabAssignment] = Field(min_length=1)

class CarSlabFarePatch(BaseModel):
    fare_amount: Optional[float] = Field(None, ge=0)
    status: Optional[int] = Field(None, ge=0, le=1)

class CarSlabFareOut(BaseModel):
    id: int
    car_id: int
    slab_id: int
    fare_amount: float
    status: int
    slab_value: Optional[float] = None
    slab_unit: Optional[int] = None
    slab_type: Optional[int] = None

class CarOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    regular_name: str
    short_name: str
    color: Optional[str] = None
    car_photo: Optional[str] = None
    car_features: Optional[str] = None
    base_fare: float
    minimum_fare: float
    small_luggage_capacity: int
    large_luggage_capacity: int
    extra_luggage_capacity: int
    num_of_passengers: int
    is_child_seat: bool
    status: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class CarDetailOut(CarOut):
    slab_fares: List[CarSlabFareOut] = []

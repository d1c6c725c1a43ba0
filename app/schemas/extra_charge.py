from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class ExtraChargeIn(BaseModel):
    area_name: str = Field(min_length=3, max_length=100)
    zip_codes: str = Field(min_length=1)  # single zip or comma-separated
    extra_charge: float = Field(0.0, ge=0)
    extra_toll_charge: float = Field(0.0, ge=0)
    status: int = Field(1, ge=0, le=1)

class ExtraChargePatch(BaseModel):
    area_name: Optional[str] = Field(None, min_length=3, max_length=100)
    zip_codes: Optional[str] = Field(None, min_length=1)
    extra_charge: Optional[float] = Field(None, ge=0)
    extra_toll_charge: Optional[float] = Field(None, ge=0)
    status: Optional[int] = Field(None, ge=0, le=1)

class ExtraChargeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    area_name: str
    zip_codes: str
    extra_charge: float
    extra_toll_charge: float
    status: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

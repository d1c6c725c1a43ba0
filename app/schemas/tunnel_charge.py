from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from typing import Optional

class TunnelChargeIn(BaseModel):
    charge_start_date: date
    charge_end_date: date
    charge_amount: float = Field(ge=0)
    status: int = Field(1, ge=0, le=1)

    @field_validator("charge_end_date")
    @classmethod
    def _end_after_start(cls, v: date, info: ValidationInfo) -> date:
        start = info.data.get("charge_start_date")
        if start is not None and v < start:
            raise ValueError("Charge end date must be on or after the start date.")
        return v

class TunnelChargePatch(BaseModel):
    charge_start_date: Optional[date] = None
    charge_end_date: Optional[date] = None
    charge_amount: Optional[float] = Field(None, ge=0)
    status: Optional[int] = Field(None, ge=0, le=1)

class TunnelChargeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    charge_start_date: date
    charge_end_date: date
    charge_amount: float
    status: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

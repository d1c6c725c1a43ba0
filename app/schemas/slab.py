from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class SlabIn(BaseModel):
    slab_value: float = Field(ge=0.01)
    slab_unit: int = Field(0, ge=0, le=1)  # 0=Mile, 1=Hour
    slab_type: int = Field(0, ge=0, le=1)  # 0=Distance, 1=HourlyService
    status: int = Field(1, ge=0, le=1)

class SlabPatch(BaseModel):
    slab_value: Optional[float] = Field(None, ge=0.01)
    slab_unit: Optional[int] = Field(None, ge=0, le=1)
    slab_type: Optional[int] = Field(None, ge=0, le=1)
    status: Optional[int] = Field(None, ge=0, le=1)

class SlabOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    slab_value: float
    slab_unit: int
    slab_type: int
    status: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

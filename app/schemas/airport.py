from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class AirportIn(BaseModel):
    name: str = Field(min_length=3, max_length=100)
    description: Optional[str] = None
    from_tax_toll: float = Field(0.0, ge=0)
    to_tax_toll: float = Field(0.0, ge=0)
    status: int = Field(1, ge=0, le=1)

class AirportPatch(BaseModel):
    name: Optional[str] = Field(None, min_length=3, max_length=100)
    description: Optional[str] = None
    from_tax_toll: Optional[float] = Field(None, ge=0)
    to_tax_toll: Optional[float] = Field(None, ge=0)
    status: Optional[int] = Field(None, ge=0, le=1)

class AirportOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    from_tax_toll: float
    to_tax_toll: float
    status: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

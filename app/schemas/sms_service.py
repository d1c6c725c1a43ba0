from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

PHONE_PATTERN = r"^\+?[0-9]{7,15}$"

class SmsServiceIn(BaseModel):
    phone_number: str = Field(max_length=20, pattern=PHONE_PATTERN)
    status: int = Field(1, ge=0, le=1)

class SmsServicePatch(BaseModel):
    phone_number: Optional[str] = Field(None, max_length=20, pattern=PHONE_PATTERN)
    status: Optional[int] = Field(None, ge=0, le=1)

class SmsServiceOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    phone_number: str
    status: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

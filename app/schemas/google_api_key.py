from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class GoogleApiKeyIn(BaseModel):
    api_key: str = Field(min_length=20, max_length=100)
    status: int = Field(1, ge=0, le=1)

class GoogleApiKeyPatch(BaseModel):
    api_key: Optional[str] = Field(None, min_length=20, max_length=100)
    status: Optional[int] = Field(None, ge=0, le=1)

class GoogleApiKeyOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    api_key: str
    status: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

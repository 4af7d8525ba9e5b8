from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from app.schemas.base import CamelModel
from app.utils.sanitize import clean_input

class UserUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6)

    @field_validator("name", mode="before")
    @classmethod
    def _clean_name(cls, value):
        return clean_input(value)

class UserOut(CamelModel):
    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None

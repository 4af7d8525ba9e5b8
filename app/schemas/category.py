from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from enum import Enum

from app.schemas.base import CamelModel
from app.utils.sanitize import clean_input

class CategoryType(str, Enum):
    income = "income"
    expense = "expense"

class CategoryBase(CamelModel):
    name: str = Field(min_length=1)
    type: CategoryType

    @field_validator("name", mode="before")
    @classmethod
    def _clean_name(cls, value):
        return clean_input(value)

class CategoryCreate(CategoryBase):
    pass

class CategoryUpdate(CategoryBase):
    pass

class CategoryOut(CamelModel):
    id: int
    name: str
    type: CategoryType
    created_by: int
    created_at: Optional[datetime] = None

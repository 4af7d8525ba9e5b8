from pydantic import EmailStr, Field, field_validator

from app.schemas.base import CamelModel
from app.schemas.user import UserOut
from app.utils.sanitize import clean_input

class RegisterRequest(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)

    @field_validator("name", mode="before")
    @classmethod
    def _clean_name(cls, value):
        return clean_input(value)

class LoginRequest(CamelModel):
    email: EmailStr
    password: str

class TokenOut(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut

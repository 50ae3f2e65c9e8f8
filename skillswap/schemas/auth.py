from pydantic import EmailStr, Field, field_validator

from .common import APIModel
from .user import User


# ======================
# AUTH REQUEST SCHEMAS
# ======================

class RegisterRequest(APIModel):
    username: str = Field(..., min_length=3, max_length=20)
    password: str = Field(..., min_length=8)
    email: EmailStr
    full_name: str = Field(..., min_length=2)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # Bcrypt limit is 72 bytes, not characters
        if len(value.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return value


class LoginRequest(APIModel):
    username: str
    password: str


# ======================
# AUTH RESPONSE SCHEMAS
# ======================

class AuthResponse(APIModel):
    user: User

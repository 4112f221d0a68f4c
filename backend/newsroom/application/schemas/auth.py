"""Auth API schemas (request/response models)."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


class AdminSignInRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=320, examples=["admin@example.com"])
    password: str = Field(..., min_length=1, max_length=128)


class AdminSignUpRequest(BaseModel):
    email: str = Field(..., min_length=3, max_length=320, examples=["admin@example.com"])
    password: str = Field(..., min_length=8, max_length=72)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password must be at most {BCRYPT_MAX_BYTES} bytes when UTF-8 encoded.")
        return v


class UserResponse(BaseModel):
    """Account as shown to clients — never includes the password hash."""

    id: int
    email: str
    roles: list[str]
    created_at: datetime

    model_config = {"from_attributes": True}

"""
User schemas - request/response shapes for registration and login
Pydantic validates the input automatically
"""
from pydantic import BaseModel, EmailStr, Field, validator
from datetime import datetime


# ============= REQUEST SCHEMAS (client -> server) =============

class UserRegister(BaseModel):
    """Body of POST /usuarios/registro"""
    name: str = Field(..., min_length=1, max_length=100, description="Display name", examples=["Ana"])
    email: EmailStr = Field(..., description="Login email", examples=["ana@forohub.com"])
    password: str = Field(..., min_length=6, max_length=100, description="At least 6 characters", examples=["secret1"])

    @validator("name")
    def name_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Name must not be blank")
        return v.strip()

    @validator("email")
    def email_lower(cls, v):
        return v.lower()


class UserLogin(BaseModel):
    """Body of POST /login"""
    email: EmailStr = Field(..., description="Email", examples=["ana@forohub.com"])
    password: str = Field(..., min_length=1, description="Password", examples=["secret1"])

    @validator("email")
    def email_lower(cls, v):
        return v.lower()


# ============= RESPONSE SCHEMAS (server -> client) =============

class UserResponse(BaseModel):
    """
    Created identity (never includes password_hash)
    """
    id: int
    name: str
    email: str
    created_at: datetime

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    """
    Returned by a successful login
    """
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Lifetime of the token in seconds")

from pydantic import BaseModel, Field
from typing import Optional


class RegisterRequest(BaseModel):
    name: Optional[str] = None
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterResponse(BaseModel):
    success: bool = True
    message: str


class LoginResponse(BaseModel):
    success: bool = True
    message: str
    token: str


class CurrentUserResponse(BaseModel):
    success: bool = True
    email: str

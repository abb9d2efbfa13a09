from typing import Any, Optional

from pydantic import BaseModel


class UserRegistrationRequest(BaseModel):
    """
    DTO for user registration request.

    Presence of fields is not enforced and profile values are stored as sent,
    whatever their JSON type.
    """
    name: Any = None
    username: Any = None
    email: Any = None
    password: Any = None
    gender: Any = None
    photo: Any = None


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    username: Any = None
    password: Any = None


class PasswordResetRequest(BaseModel):
    """DTO for the forget-password request body"""
    password: Any = None


class TokenResponse(BaseModel):
    """DTO for a successful login"""
    token: str
    success: bool = True
    message: str = "Successfully Logged In"

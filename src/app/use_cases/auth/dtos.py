"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for the auth domain.
Field names follow the public JSON contract (aliases where it is camelCase).
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class UserInfo(BaseModel):
    """Public account fields in authentication responses"""

    id: str
    email: str
    fullname: str


class AuthResponse(BaseModel):
    """Response for register and login use cases"""

    message: str
    user: UserInfo
    token: str


class MessageResponse(BaseModel):
    """Plain confirmation response"""

    message: str


class RefreshTokenResponse(BaseModel):
    """Response for refresh token use case"""

    model_config = ConfigDict(populate_by_name=True)

    token: str
    # Only set when refresh token rotation is enabled
    refresh_token: Optional[str] = Field(default=None, alias="refreshToken")


class ForgotPasswordResponse(BaseModel):
    """Response for forgot password use case"""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    # Only set when the deployment exposes reset tokens (non-production)
    reset_token: Optional[str] = Field(default=None, alias="resetToken")


class ValidateCredentialsResponse(BaseModel):
    """Response for validate credentials use case"""

    valid: bool

"""
Authentication Use Case Commands

Command objects represent validated business intent.
Created by the API layer from HTTP payloads; contain no HTTP concerns.
"""

from pydantic import BaseModel


class RegisterCommand(BaseModel):
    email: str
    password: str
    full_name: str


class LoginCommand(BaseModel):
    email: str
    password: str


class RefreshTokenCommand(BaseModel):
    refresh_token: str


class ForgotPasswordCommand(BaseModel):
    email: str


class ResetPasswordCommand(BaseModel):
    reset_token: str
    new_password: str


class ValidateCredentialsCommand(BaseModel):
    email: str
    password: str

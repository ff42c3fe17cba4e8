"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .validate_credentials_use_case import ValidateCredentialsUseCase
from .commands import (
    RegisterCommand,
    LoginCommand,
    RefreshTokenCommand,
    ForgotPasswordCommand,
    ResetPasswordCommand,
    ValidateCredentialsCommand,
)
from .dtos import (
    AuthResponse,
    ForgotPasswordResponse,
    MessageResponse,
    RefreshTokenResponse,
    UserInfo,
    ValidateCredentialsResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "RefreshTokenUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    "ValidateCredentialsUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "LoginCommand",
    "RefreshTokenCommand",
    "ForgotPasswordCommand",
    "ResetPasswordCommand",
    "ValidateCredentialsCommand",
    # DTOs - Responses
    "AuthResponse",
    "ForgotPasswordResponse",
    "MessageResponse",
    "RefreshTokenResponse",
    "ValidateCredentialsResponse",
    # DTOs - Nested Models
    "UserInfo",
]

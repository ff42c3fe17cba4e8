"""
Use Cases

Organized into domain folders:
- auth/: Credential and token flows
- users/: Reads on the account behind a session token
"""

from .auth import (
    RegisterUseCase,
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
    ValidateCredentialsUseCase,
)
from .users import (
    GetProfileUseCase,
    GetTwoFactorStatusUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "RefreshTokenUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    "ValidateCredentialsUseCase",
    # Users
    "GetProfileUseCase",
    "GetTwoFactorStatusUseCase",
]

"""
Account Use Cases

Read-only operations on the account behind a session token.
"""

from .get_profile_use_case import GetProfileUseCase
from .get_two_factor_status_use_case import GetTwoFactorStatusUseCase
from .dtos import ProfileResponse, TwoFactorStatusResponse

__all__ = [
    "GetProfileUseCase",
    "GetTwoFactorStatusUseCase",
    "ProfileResponse",
    "TwoFactorStatusResponse",
]

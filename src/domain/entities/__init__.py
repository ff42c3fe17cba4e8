"""
Auth Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import ErrorCode, TokenType

# Export all entities
from .account import Account
from .refresh_token import RefreshToken
from .password_reset_token import PasswordResetToken
from .two_factor_auth import TwoFactorAuth

__all__ = [
    # Enums
    "ErrorCode",
    "TokenType",
    # Entities
    "Account",
    "RefreshToken",
    "PasswordResetToken",
    "TwoFactorAuth",
]

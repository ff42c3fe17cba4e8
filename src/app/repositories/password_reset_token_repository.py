from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[PasswordResetToken]:
        """Get password reset token by its exact value"""
        pass

    @abstractmethod
    async def delete_by_token(self, token: str) -> int:
        """Delete the password reset token with this exact value. Returns rows deleted."""
        pass

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import RefreshToken


class IRefreshTokenRepository(ABC):
    """RefreshToken repository interface - application layer"""

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[RefreshToken]:
        """Get refresh token record by its exact value"""
        pass

    @abstractmethod
    async def create(self, refresh_token: RefreshToken) -> RefreshToken:
        """Create a new refresh token record"""
        pass

    @abstractmethod
    async def delete_by_token(self, token: str) -> int:
        """Delete the record with this exact value. Returns rows deleted."""
        pass

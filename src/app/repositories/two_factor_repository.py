from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import TwoFactorAuth


class ITwoFactorRepository(ABC):
    """TwoFactorAuth repository interface - application layer (read only)"""

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[TwoFactorAuth]:
        """Get the two-factor record for an account, None when disabled"""
        pass

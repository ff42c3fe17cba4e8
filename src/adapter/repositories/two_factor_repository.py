from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.two_factor_repository import ITwoFactorRepository
from src.domain.entities import TwoFactorAuth


class TwoFactorRepository(ITwoFactorRepository):
    """TwoFactorAuth repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: UUID) -> Optional[TwoFactorAuth]:
        stmt = select(TwoFactorAuth).where(TwoFactorAuth.user_id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

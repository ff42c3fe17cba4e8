from typing import Optional

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.refresh_token_repository import IRefreshTokenRepository
from src.domain.entities import RefreshToken


class RefreshTokenRepository(IRefreshTokenRepository):
    """RefreshToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_token(self, token: str) -> Optional[RefreshToken]:
        """Get refresh token record by its exact value"""
        stmt = select(RefreshToken).where(RefreshToken.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, refresh_token: RefreshToken) -> RefreshToken:
        """Create a new refresh token record"""
        self.session.add(refresh_token)
        await self.session.flush()
        await self.session.refresh(refresh_token)
        return refresh_token

    async def delete_by_token(self, token: str) -> int:
        """Delete the record with this exact value"""
        stmt = delete(RefreshToken).where(RefreshToken.token == token)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

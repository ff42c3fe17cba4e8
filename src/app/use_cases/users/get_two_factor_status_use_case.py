from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import TwoFactorStatusResponse


class GetTwoFactorStatusUseCase:
    """Reports whether two-factor authentication is enabled (a record exists) for an account"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID) -> Result[TwoFactorStatusResponse]:
        async with self.uow:
            record = await self.uow.two_factor.get_by_user_id(account_id)
            return Return.ok(TwoFactorStatusResponse(enabled=record is not None))

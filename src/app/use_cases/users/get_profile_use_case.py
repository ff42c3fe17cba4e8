"""
Get Profile Use Case

Loads the public profile of the account behind a session token.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ErrorCode
from .dtos import ProfileResponse


class GetProfileUseCase:
    """
    Use case for loading the current account's profile.

    Business Rules:
    - account_id comes from an already validated session token
    - The account may have been deleted since the token was issued;
      that case is USER_NOT_FOUND
    - Only public fields are returned (never the password hash)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID) -> Result[ProfileResponse]:
        """
        Execute get profile use case.

        Args:
            account_id: Account UUID from the session token

        Returns:
            Result with ProfileResponse, or Error
        """
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND.value, "User not found"))

            return Return.ok(
                ProfileResponse(
                    id=str(account.id),
                    email=account.email,
                    fullname=account.full_name,
                    created_at=account.created_at,
                )
            )

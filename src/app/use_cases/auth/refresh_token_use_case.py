"""
Refresh Token Use Case

Exchanges a stored refresh token for a new session token.
"""

import secrets

from libs.result import Error, Result, Return
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import ConcurrentUpdateError, UnitOfWork
from src.app.use_cases.validation import require_non_empty
from src.domain.entities import ErrorCode, RefreshToken
from .commands import RefreshTokenCommand
from .dtos import RefreshTokenResponse


class RefreshTokenUseCase:
    """
    Use case for refreshing session tokens.

    Business Rules:
    - Refresh token must exist in the store (exact match)
    - New session token is bound to the record's account id and email
    - Without rotation the refresh token stays valid and is not returned
    - With rotation the old record is deleted and a new opaque token is
      stored and returned; a token already rotated away is refused
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_service: TokenService,
        rotate: bool = False,
    ):
        self.uow = uow
        self.token_service = token_service
        self.rotate = rotate

    async def execute(self, command: RefreshTokenCommand) -> Result[RefreshTokenResponse]:
        """
        Execute refresh token use case.

        Args:
            command: RefreshTokenCommand with the refresh token value

        Returns:
            Result with RefreshTokenResponse containing the new session token, or Error
        """
        validation = require_non_empty(refreshToken=command.refresh_token)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            record = await self.uow.refresh_tokens.get_by_token(command.refresh_token)

            if record is None:
                return Return.err(
                    Error(ErrorCode.INVALID_TOKEN.value, "Invalid refresh token")
                )

            user_id = record.user_id
            user_email = record.user_email

            new_refresh_token = None
            if self.rotate:
                deleted = await self.uow.refresh_tokens.delete_by_token(
                    command.refresh_token
                )
                if deleted == 0:
                    # Another request rotated it first
                    return Return.err(
                        Error(ErrorCode.INVALID_TOKEN.value, "Invalid refresh token")
                    )

                new_refresh_token = secrets.token_urlsafe(32)
                await self.uow.refresh_tokens.create(
                    RefreshToken(
                        token=new_refresh_token,
                        user_id=user_id,
                        user_email=user_email,
                    )
                )
                try:
                    await self.uow.commit()
                except ConcurrentUpdateError:
                    return Return.err(
                        Error(ErrorCode.INVALID_TOKEN.value, "Invalid refresh token")
                    )

            token = self.token_service.issue_session_token(user_id, user_email)

            return Return.ok(
                RefreshTokenResponse(token=token, refresh_token=new_refresh_token)
            )

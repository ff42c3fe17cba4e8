"""
Reset Password Use Case

Consumes a password reset token and sets a new password.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import ConcurrentUpdateError, UnitOfWork
from src.app.use_cases.validation import require_non_empty
from src.domain.entities import ErrorCode
from .commands import ResetPasswordCommand
from .dtos import MessageResponse

logger = logging.getLogger(__name__)

INVALID_RESET_TOKEN_MESSAGE = "Invalid or expired password reset token"


class ResetPasswordUseCase:
    """
    Use case for confirming a password reset.

    Business Rules:
    - Token signature, expiry and type are verified first
    - Token must still be present in the store (single use)
    - New password is hashed with bcrypt
    - Password update and token delete are staged in that order and
      committed together; a failure before the commit leaves the token
      usable for a retry
    - The delete must remove exactly one row, otherwise a concurrent reset
      already spent the token and this one is rolled back
    - A token whose email matches no account is refused and kept
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, command: ResetPasswordCommand) -> Result[MessageResponse]:
        """
        Execute reset password use case.

        Args:
            command: ResetPasswordCommand with reset token and new password

        Returns:
            Result with confirmation message, or Error

        Errors:
            - INVALID_INPUT: Missing token or password
            - INVALID_TOKEN: Bad signature, expired, wrong type, or already used
        """
        validation = require_non_empty(
            resetToken=command.reset_token, newPassword=command.new_password
        )
        if validation.is_err():
            return Return.err(validation.error)

        payload = self.token_service.verify_reset_token(command.reset_token)
        if payload is None:
            return Return.err(Error(ErrorCode.INVALID_TOKEN.value, INVALID_RESET_TOKEN_MESSAGE))

        email = payload["email"]

        async with self.uow:
            stored_token = await self.uow.password_reset_tokens.get_by_token(
                command.reset_token
            )
            if stored_token is None:
                return Return.err(
                    Error(ErrorCode.INVALID_TOKEN.value, INVALID_RESET_TOKEN_MESSAGE)
                )

            password_hash = await self.password_hasher.hash(command.new_password)

            updated = await self.uow.accounts.update_password_hash(email, password_hash)
            if updated == 0:
                return Return.err(
                    Error(ErrorCode.INVALID_TOKEN.value, INVALID_RESET_TOKEN_MESSAGE)
                )

            deleted = await self.uow.password_reset_tokens.delete_by_token(
                command.reset_token
            )
            if deleted != 1:
                await self.uow.rollback()
                return Return.err(
                    Error(ErrorCode.INVALID_TOKEN.value, INVALID_RESET_TOKEN_MESSAGE)
                )

            try:
                await self.uow.commit()
            except ConcurrentUpdateError:
                return Return.err(
                    Error(ErrorCode.INVALID_TOKEN.value, INVALID_RESET_TOKEN_MESSAGE)
                )

            logger.info("Password reset completed")

            return Return.ok(MessageResponse(message="Password reset successfully"))

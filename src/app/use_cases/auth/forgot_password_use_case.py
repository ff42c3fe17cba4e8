"""
Forgot Password Use Case

Issues single-use password reset tokens.
"""

import logging

from libs.result import Result, Return
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import require_non_empty
from src.domain.entities import PasswordResetToken
from .commands import ForgotPasswordCommand
from .dtos import ForgotPasswordResponse

logger = logging.getLogger(__name__)

RESET_REQUESTED_MESSAGE = "Check your email to reset your password"


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Reset token is a signed JWT embedding the email (1 hour expiry)
    - Token value is persisted keyed by email until it is consumed
    - By default no account existence check is made
    - With require_account, unknown emails get the same message but
      nothing is minted or stored (no email enumeration)
    - The raw token is returned only when expose_token is set; otherwise
      it must be delivered out-of-band
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_service: TokenService,
        require_account: bool = False,
        expose_token: bool = True,
    ):
        self.uow = uow
        self.token_service = token_service
        self.require_account = require_account
        self.expose_token = expose_token

    async def execute(self, command: ForgotPasswordCommand) -> Result[ForgotPasswordResponse]:
        """
        Execute forgot password use case.

        Args:
            command: ForgotPasswordCommand with the account email

        Returns:
            Result with confirmation message (and the token when exposed), or Error
        """
        validation = require_non_empty(email=command.email)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            if self.require_account:
                account = await self.uow.accounts.get_by_email(command.email)
                if account is None:
                    return Return.ok(ForgotPasswordResponse(message=RESET_REQUESTED_MESSAGE))

            reset_token = self.token_service.issue_reset_token(command.email)

            await self.uow.password_reset_tokens.create(
                PasswordResetToken(email=command.email, token=reset_token)
            )
            await self.uow.commit()

            logger.info("Password reset token issued")

            # NOTE: email delivery is handled outside this service
            return Return.ok(
                ForgotPasswordResponse(
                    message=RESET_REQUESTED_MESSAGE,
                    reset_token=reset_token if self.expose_token else None,
                )
            )

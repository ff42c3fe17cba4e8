"""
Login Use Case

Handles credential verification and session token issuance.
"""

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import require_non_empty
from src.domain.entities import ErrorCode
from .commands import LoginCommand
from .dtos import AuthResponse, UserInfo

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class LoginUseCase:
    """
    Use case for user login and session token issuance.

    Business Rules:
    - Unknown email and wrong password produce the same error
    - Constant-time password comparison to prevent timing attacks
    - A dummy hash check runs when the email is unknown
    - A fresh session token is minted on every success
    - The store is never written
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

    async def execute(self, command: LoginCommand) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            command: LoginCommand with email and plain text password

        Returns:
            Result with AuthResponse containing the session token, or Error
        """
        validation = require_non_empty(email=command.email, password=command.password)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            account = await self.uow.accounts.get_by_email(command.email)

            if account is None:
                # Keep response time independent of whether the email exists
                await self.password_hasher.burn(command.password)
                return Return.err(
                    Error(ErrorCode.INVALID_CREDENTIALS.value, INVALID_CREDENTIALS_MESSAGE)
                )

            password_valid = await self.password_hasher.verify(
                command.password, account.password_hash
            )
            if not password_valid:
                return Return.err(
                    Error(ErrorCode.INVALID_CREDENTIALS.value, INVALID_CREDENTIALS_MESSAGE)
                )

            token = self.token_service.issue_session_token(account.id, account.email)

            return Return.ok(
                AuthResponse(
                    message="Login successful",
                    user=UserInfo(
                        id=str(account.id),
                        email=account.email,
                        fullname=account.full_name,
                    ),
                    token=token,
                )
            )

import logging
from datetime import UTC, datetime

from libs.result import Error, Result, Return
from src.app.repositories.account_repository import DuplicateEmailError
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.validation import require_non_empty
from src.domain.entities import Account, ErrorCode
from .commands import RegisterCommand
from .dtos import AuthResponse, UserInfo

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (email, password, full_name)
    - Output: Result[AuthResponse] (public account fields + session token)

    Business Logic:
    1. Reject empty fields (INVALID_INPUT)
    2. Check if email already exists (EMAIL_ALREADY_EXISTS)
    3. Hash password with bcrypt
    4. Create Account and commit
    5. A unique-constraint hit on insert/commit is also EMAIL_ALREADY_EXISTS
       (two registrations racing past the existence check)
    6. Mint a session token for the new account
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

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        validation = require_non_empty(
            email=command.email,
            password=command.password,
            fullname=command.full_name,
        )
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            existing_account = await self.uow.accounts.get_by_email(command.email)
            if existing_account:
                return Return.err(
                    Error(ErrorCode.EMAIL_ALREADY_EXISTS.value, "Email already registered")
                )

            password_hash = await self.password_hasher.hash(command.password)

            account = Account(
                email=command.email,
                password_hash=password_hash,
                full_name=command.full_name,
                created_at=datetime.now(UTC),
            )
            try:
                account = await self.uow.accounts.create(account)
                await self.uow.commit()
            except DuplicateEmailError:
                return Return.err(
                    Error(ErrorCode.EMAIL_ALREADY_EXISTS.value, "Email already registered")
                )

            logger.info(f"Account registered: {account.id}")

            token = self.token_service.issue_session_token(account.id, account.email)

            return Return.ok(
                AuthResponse(
                    message="User registered successfully",
                    user=UserInfo(
                        id=str(account.id),
                        email=account.email,
                        fullname=account.full_name,
                    ),
                    token=token,
                )
            )

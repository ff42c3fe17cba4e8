"""
Auth Service

Request-scoped facade over the authentication use cases. One instance is built
per request around a fresh UnitOfWork; the hasher, token service and policy are
process-wide and immutable.
"""

import asyncio
import logging
from typing import Awaitable, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from libs.result import Error, Result, Return
from src.app.services.deadline_unit_of_work import DeadlineUnitOfWork
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    ForgotPasswordCommand,
    ForgotPasswordResponse,
    ForgotPasswordUseCase,
    LoginCommand,
    LoginUseCase,
    LogoutUseCase,
    MessageResponse,
    RefreshTokenCommand,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterUseCase,
    ResetPasswordCommand,
    ResetPasswordUseCase,
    ValidateCredentialsCommand,
    ValidateCredentialsResponse,
    ValidateCredentialsUseCase,
)
from src.app.use_cases.users import (
    GetProfileUseCase,
    GetTwoFactorStatusUseCase,
    ProfileResponse,
    TwoFactorStatusResponse,
)
from src.domain.entities import ErrorCode

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AuthPolicy(BaseModel):
    """Behaviour switches for the auth operations"""

    model_config = ConfigDict(frozen=True)

    rotate_refresh_tokens: bool = False
    reset_requires_account: bool = False
    expose_reset_token: bool = True
    store_timeout_seconds: float = 10.0

    @classmethod
    def from_config(cls, config) -> "AuthPolicy":
        return cls(
            rotate_refresh_tokens=config.ROTATE_REFRESH_TOKENS,
            reset_requires_account=config.RESET_REQUIRES_ACCOUNT,
            expose_reset_token=config.EXPOSE_RESET_TOKEN,
            store_timeout_seconds=config.STORE_TIMEOUT_SECONDS,
        )


class AuthService:
    """
    Credential and token lifecycle operations.

    Every method returns a Result. Business failures come back from the use
    cases already classified; anything else raised underneath (store, driver,
    crypto) is logged here and returned as DEPENDENCY_ERROR with a safe
    message. Every store round-trip runs under `store_timeout_seconds`
    (see DeadlineUnitOfWork); an expired round-trip returns TIMEOUT. Password
    hashing is not bounded by it.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        token_service: TokenService,
        policy: AuthPolicy = AuthPolicy(),
    ):
        self.uow = DeadlineUnitOfWork(uow, policy.store_timeout_seconds)
        self.password_hasher = password_hasher
        self.token_service = token_service
        self.policy = policy

    async def _run(self, operation: str, awaitable: Awaitable[Result[T]]) -> Result[T]:
        try:
            return await awaitable
        except asyncio.TimeoutError:
            logger.warning(
                f"{operation}: store round-trip exceeded {self.policy.store_timeout_seconds}s"
            )
            return Return.err(Error(ErrorCode.TIMEOUT.value, "Operation timed out"))
        except Exception:
            logger.exception(f"{operation} failed on a dependency")
            return Return.err(
                Error(ErrorCode.DEPENDENCY_ERROR.value, "Internal server error")
            )

    async def register(self, command: RegisterCommand) -> Result[AuthResponse]:
        use_case = RegisterUseCase(self.uow, self.password_hasher, self.token_service)
        return await self._run("register", use_case.execute(command))

    async def login(self, command: LoginCommand) -> Result[AuthResponse]:
        use_case = LoginUseCase(self.uow, self.password_hasher, self.token_service)
        return await self._run("login", use_case.execute(command))

    async def logout(self) -> Result[MessageResponse]:
        return await self._run("logout", LogoutUseCase().execute())

    async def refresh_token(self, command: RefreshTokenCommand) -> Result[RefreshTokenResponse]:
        use_case = RefreshTokenUseCase(
            self.uow,
            self.token_service,
            rotate=self.policy.rotate_refresh_tokens,
        )
        return await self._run("refresh_token", use_case.execute(command))

    async def forgot_password(
        self, command: ForgotPasswordCommand
    ) -> Result[ForgotPasswordResponse]:
        use_case = ForgotPasswordUseCase(
            self.uow,
            self.token_service,
            require_account=self.policy.reset_requires_account,
            expose_token=self.policy.expose_reset_token,
        )
        return await self._run("forgot_password", use_case.execute(command))

    async def reset_password(self, command: ResetPasswordCommand) -> Result[MessageResponse]:
        use_case = ResetPasswordUseCase(self.uow, self.password_hasher, self.token_service)
        return await self._run("reset_password", use_case.execute(command))

    async def validate_credentials(
        self, command: ValidateCredentialsCommand
    ) -> Result[ValidateCredentialsResponse]:
        use_case = ValidateCredentialsUseCase(self.uow, self.password_hasher)
        return await self._run("validate_credentials", use_case.execute(command))

    async def get_profile(self, account_id: UUID) -> Result[ProfileResponse]:
        return await self._run("get_profile", GetProfileUseCase(self.uow).execute(account_id))

    async def get_two_factor_status(self, account_id: UUID) -> Result[TwoFactorStatusResponse]:
        use_case = GetTwoFactorStatusUseCase(self.uow)
        return await self._run("get_two_factor_status", use_case.execute(account_id))

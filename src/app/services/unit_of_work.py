from abc import ABC, abstractmethod

from src.app.repositories.account_repository import IAccountRepository
from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.app.repositories.refresh_token_repository import IRefreshTokenRepository
from src.app.repositories.two_factor_repository import ITwoFactorRepository


class ConcurrentUpdateError(Exception):
    """Raised by commit when a row this unit of work deleted was already removed by another one"""


class UnitOfWork(ABC):
    """
    Abstract UnitOfWork - the credential store seen by the use cases.

    Defines repository access and transaction management. Implementations
    must enforce email uniqueness on accounts, and a row may be deleted by
    at most one committed unit of work.
    """

    # Repository properties (initialized in __aenter__)
    accounts: IAccountRepository
    refresh_tokens: IRefreshTokenRepository
    password_reset_tokens: IPasswordResetTokenRepository
    two_factor: ITwoFactorRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

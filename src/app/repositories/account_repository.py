from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import Account


class DuplicateEmailError(Exception):
    """Raised by IAccountRepository.create when the email is already taken"""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Account with email {email!r} already exists")


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Create a new account. Raises DuplicateEmailError on a taken email."""
        pass

    @abstractmethod
    async def update_password_hash(self, email: str, password_hash: str) -> int:
        """Set the password hash of the account matching email. Returns rows updated."""
        pass

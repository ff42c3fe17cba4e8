"""
In-memory credential store.

Backs the `memory` STORE_BACKEND and the service-level tests. Each unit of
work reads and writes a private copy of the tables; commit merges its own
changes back into the shared InMemoryDatabase, and rollback discards them.
Email uniqueness, and the existence of every row being deleted, are
re-checked at commit time against what other units of work have committed
in the meantime.
"""

from typing import Dict, Optional
from uuid import UUID

from src.app.repositories.account_repository import DuplicateEmailError, IAccountRepository
from src.app.repositories.password_reset_token_repository import IPasswordResetTokenRepository
from src.app.repositories.refresh_token_repository import IRefreshTokenRepository
from src.app.repositories.two_factor_repository import ITwoFactorRepository
from src.app.services.unit_of_work import ConcurrentUpdateError, UnitOfWork
from src.domain.entities import Account, PasswordResetToken, RefreshToken, TwoFactorAuth

TABLES = ("accounts", "refresh_tokens", "password_reset_tokens", "two_factor")


def _copy_table(table: dict) -> dict:
    return {key: type(row)(**row.model_dump()) for key, row in table.items()}


class InMemoryDatabase:
    """Shared tables; keys are the natural lookup key of each record"""

    def __init__(self):
        self.accounts: Dict[UUID, Account] = {}
        self.refresh_tokens: Dict[str, RefreshToken] = {}
        self.password_reset_tokens: Dict[str, PasswordResetToken] = {}
        self.two_factor: Dict[UUID, TwoFactorAuth] = {}  # keyed by user_id

    def add_refresh_token(self, refresh_token: RefreshToken) -> None:
        self.refresh_tokens[refresh_token.token] = refresh_token

    def enable_two_factor(self, user_id: UUID) -> None:
        self.two_factor[user_id] = TwoFactorAuth(user_id=user_id)


class InMemoryAccountRepository(IAccountRepository):
    def __init__(self, table: Dict[UUID, Account]):
        self.table = table

    async def get_by_email(self, email: str) -> Optional[Account]:
        for account in self.table.values():
            if account.email == email:
                return account
        return None

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        return self.table.get(account_id)

    async def create(self, account: Account) -> Account:
        if await self.get_by_email(account.email) is not None:
            raise DuplicateEmailError(account.email)
        self.table[account.id] = account
        return account

    async def update_password_hash(self, email: str, password_hash: str) -> int:
        account = await self.get_by_email(email)
        if account is None:
            return 0
        account.password_hash = password_hash
        return 1


class _InMemoryTokenTable:
    """Token rows keyed by value; a delete only counts while the row is still committed"""

    def __init__(self, table: dict, snapshot: dict, committed: dict):
        self.table = table
        self.snapshot = snapshot
        self.committed = committed

    async def delete_by_token(self, token: str) -> int:
        if token not in self.table:
            return 0
        if token in self.snapshot and token not in self.committed:
            # Consumed by another unit of work since this one began
            return 0
        del self.table[token]
        return 1


class InMemoryRefreshTokenRepository(_InMemoryTokenTable, IRefreshTokenRepository):
    async def get_by_token(self, token: str) -> Optional[RefreshToken]:
        return self.table.get(token)

    async def create(self, refresh_token: RefreshToken) -> RefreshToken:
        self.table[refresh_token.token] = refresh_token
        return refresh_token


class InMemoryPasswordResetTokenRepository(_InMemoryTokenTable, IPasswordResetTokenRepository):
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        self.table[token.token] = token
        return token

    async def get_by_token(self, token: str) -> Optional[PasswordResetToken]:
        return self.table.get(token)


class InMemoryTwoFactorRepository(ITwoFactorRepository):
    def __init__(self, table: Dict[UUID, TwoFactorAuth]):
        self.table = table

    async def get_by_user_id(self, user_id: UUID) -> Optional[TwoFactorAuth]:
        return self.table.get(user_id)


class InMemoryUnitOfWork(UnitOfWork):
    """UnitOfWork over an InMemoryDatabase"""

    def __init__(self, database: InMemoryDatabase):
        self.database = database
        self.commits = 0
        self._snapshot: Dict[str, dict] = {}
        self._working: Dict[str, dict] = {}

    def _begin(self):
        self._snapshot = {name: _copy_table(getattr(self.database, name)) for name in TABLES}
        self._working = {name: _copy_table(self._snapshot[name]) for name in TABLES}

        self.accounts = InMemoryAccountRepository(self._working["accounts"])
        self.refresh_tokens = InMemoryRefreshTokenRepository(*self._tables("refresh_tokens"))
        self.password_reset_tokens = InMemoryPasswordResetTokenRepository(
            *self._tables("password_reset_tokens")
        )
        self.two_factor = InMemoryTwoFactorRepository(self._working["two_factor"])

    def _tables(self, name: str):
        return self._working[name], self._snapshot[name], getattr(self.database, name)

    def _check_deleted_rows_still_exist(self):
        for name in TABLES:
            committed = getattr(self.database, name)
            for key in self._snapshot[name].keys() - self._working[name].keys():
                if key not in committed:
                    raise ConcurrentUpdateError(f"{name}: {key} already removed")

    def _check_unique_emails(self):
        committed = self.database.accounts
        for key, account in self._working["accounts"].items():
            if key in self._snapshot["accounts"]:
                continue
            for other_key, other in committed.items():
                if other_key != key and other.email == account.email:
                    raise DuplicateEmailError(account.email)

    async def __aenter__(self):
        self._begin()
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        self._check_unique_emails()
        self._check_deleted_rows_still_exist()

        for name in TABLES:
            committed = getattr(self.database, name)
            before = self._snapshot[name]
            after = self._working[name]

            for key in before.keys() - after.keys():
                committed.pop(key, None)
            for key, row in after.items():
                if key not in before or before[key].model_dump() != row.model_dump():
                    committed[key] = type(row)(**row.model_dump())

        self.commits += 1
        self._begin()

    async def rollback(self):
        self._begin()

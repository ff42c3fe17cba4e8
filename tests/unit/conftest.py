from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService

TEST_SECRET = "unit-test-secret"


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_email = AsyncMock(return_value=None)
    uow.accounts.get_by_id = AsyncMock(return_value=None)
    uow.accounts.create = AsyncMock(side_effect=lambda account: account)
    uow.accounts.update_password_hash = AsyncMock(return_value=1)

    uow.refresh_tokens = MagicMock()
    uow.refresh_tokens.get_by_token = AsyncMock(return_value=None)
    uow.refresh_tokens.create = AsyncMock(side_effect=lambda token: token)
    uow.refresh_tokens.delete_by_token = AsyncMock(return_value=1)

    uow.password_reset_tokens = MagicMock()
    uow.password_reset_tokens.create = AsyncMock(side_effect=lambda token: token)
    uow.password_reset_tokens.get_by_token = AsyncMock(return_value=None)
    uow.password_reset_tokens.delete_by_token = AsyncMock(return_value=1)

    uow.two_factor = MagicMock()
    uow.two_factor.get_by_user_id = AsyncMock(return_value=None)

    return uow


@pytest.fixture
def password_hasher():
    """Lowest bcrypt cost factor keeps the suite fast"""
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service():
    return TokenService(
        secret=TEST_SECRET,
        session_ttl=timedelta(hours=24),
        reset_ttl=timedelta(hours=1),
    )

"""
Unit tests for ForgotPasswordUseCase
"""
from uuid import uuid4

import pytest

from src.app.use_cases.auth import ForgotPasswordCommand, ForgotPasswordUseCase
from src.domain.entities import Account


@pytest.mark.asyncio
async def test_successful_forgot_password(mock_uow, token_service):
    """A reset token embedding the email is minted, stored and returned"""
    # Arrange
    use_case = ForgotPasswordUseCase(mock_uow, token_service)

    # Act
    result = await use_case.execute(ForgotPasswordCommand(email="user@example.com"))

    # Assert
    assert result.is_ok()
    data = result.value
    assert data.message == "Check your email to reset your password"
    assert data.reset_token is not None

    payload = token_service.verify_reset_token(data.reset_token)
    assert payload["email"] == "user@example.com"

    stored = mock_uow.password_reset_tokens.create.call_args.args[0]
    assert stored.email == "user@example.com"
    assert stored.token == data.reset_token
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_forgot_password_no_existence_check_by_default(mock_uow, token_service):
    """Without gating, unknown emails still get a token and the store is not consulted"""
    use_case = ForgotPasswordUseCase(mock_uow, token_service)

    result = await use_case.execute(ForgotPasswordCommand(email="ghost@example.com"))

    assert result.is_ok()
    mock_uow.accounts.get_by_email.assert_not_called()
    mock_uow.password_reset_tokens.create.assert_called_once()


@pytest.mark.asyncio
async def test_forgot_password_gated_unknown_email(mock_uow, token_service):
    """With gating, unknown emails get the same message and nothing is stored"""
    use_case = ForgotPasswordUseCase(mock_uow, token_service, require_account=True)

    result = await use_case.execute(ForgotPasswordCommand(email="ghost@example.com"))

    assert result.is_ok()
    assert result.value.message == "Check your email to reset your password"
    assert result.value.reset_token is None
    mock_uow.password_reset_tokens.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_forgot_password_gated_known_email(mock_uow, token_service):
    mock_uow.accounts.get_by_email.return_value = Account(
        id=uuid4(), email="user@example.com", password_hash="x", full_name="User"
    )
    use_case = ForgotPasswordUseCase(mock_uow, token_service, require_account=True)

    result = await use_case.execute(ForgotPasswordCommand(email="user@example.com"))

    assert result.is_ok()
    assert result.value.reset_token is not None
    mock_uow.password_reset_tokens.create.assert_called_once()


@pytest.mark.asyncio
async def test_forgot_password_token_not_exposed(mock_uow, token_service):
    """Production mode stores the token but leaves it out of the response"""
    use_case = ForgotPasswordUseCase(mock_uow, token_service, expose_token=False)

    result = await use_case.execute(ForgotPasswordCommand(email="user@example.com"))

    assert result.is_ok()
    assert result.value.reset_token is None
    mock_uow.password_reset_tokens.create.assert_called_once()


@pytest.mark.asyncio
async def test_forgot_password_missing_email(mock_uow, token_service):
    use_case = ForgotPasswordUseCase(mock_uow, token_service)

    result = await use_case.execute(ForgotPasswordCommand(email=""))

    assert result.is_err()
    assert result.error.code == "INVALID_INPUT"

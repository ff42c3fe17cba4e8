"""
AuthService against the in-memory credential store.
"""
import asyncio
from uuid import UUID, uuid4

import pytest

from src.adapter.services.in_memory_unit_of_work import InMemoryDatabase, InMemoryUnitOfWork
from src.app.services.auth_service import AuthPolicy, AuthService
from src.app.use_cases.auth import (
    ForgotPasswordCommand,
    LoginCommand,
    RefreshTokenCommand,
    RegisterCommand,
    ResetPasswordCommand,
    ValidateCredentialsCommand,
)
from src.domain.entities import RefreshToken


@pytest.fixture
def database():
    return InMemoryDatabase()


@pytest.fixture
def make_service(database, password_hasher, token_service):
    def factory(policy: AuthPolicy = AuthPolicy()) -> AuthService:
        return AuthService(InMemoryUnitOfWork(database), password_hasher, token_service, policy)

    return factory


@pytest.fixture
def service(make_service):
    return make_service()


def dump(database: InMemoryDatabase) -> dict:
    return {
        name: {key: row.model_dump() for key, row in getattr(database, name).items()}
        for name in ("accounts", "refresh_tokens", "password_reset_tokens", "two_factor")
    }


@pytest.mark.asyncio
async def test_end_to_end_password_reset_scenario(service, token_service):
    """Register, login, forgot, reset, then only the new password works"""
    registered = await service.register(
        RegisterCommand(email="a@x.com", password="pw1", full_name="Ann")
    )
    assert registered.is_ok()
    t1 = registered.value.token

    logged_in = await service.login(LoginCommand(email="a@x.com", password="pw1"))
    assert logged_in.is_ok()
    t2 = logged_in.value.token
    assert t1 != t2
    assert token_service.verify_session_token(t1) is not None
    assert token_service.verify_session_token(t2) is not None

    forgot = await service.forgot_password(ForgotPasswordCommand(email="a@x.com"))
    assert forgot.is_ok()
    reset_token = forgot.value.reset_token

    reset = await service.reset_password(
        ResetPasswordCommand(reset_token=reset_token, new_password="pw2")
    )
    assert reset.is_ok()

    old = await service.login(LoginCommand(email="a@x.com", password="pw1"))
    assert old.is_err()
    assert old.error.code == "INVALID_CREDENTIALS"

    new = await service.login(LoginCommand(email="a@x.com", password="pw2"))
    assert new.is_ok()


@pytest.mark.asyncio
async def test_register_then_login_token_is_accepted_by_profile(service, token_service):
    await service.register(RegisterCommand(email="a@x.com", password="pw1", full_name="Ann"))
    logged_in = await service.login(LoginCommand(email="a@x.com", password="pw1"))

    payload = token_service.verify_session_token(logged_in.value.token)
    profile = await service.get_profile(UUID(payload["id"]))

    assert profile.is_ok()
    assert profile.value.email == "a@x.com"
    assert profile.value.fullname == "Ann"


@pytest.mark.asyncio
async def test_duplicate_register_leaves_one_account(service, database):
    first = await service.register(RegisterCommand(email="a@x.com", password="pw1", full_name="Ann"))
    second = await service.register(RegisterCommand(email="a@x.com", password="pw9", full_name="Bob"))

    assert first.is_ok()
    assert second.is_err()
    assert second.error.code == "EMAIL_ALREADY_EXISTS"
    assert [a.email for a in database.accounts.values()] == ["a@x.com"]


@pytest.mark.asyncio
async def test_concurrent_duplicate_register(make_service, database):
    """Two registrations racing past the existence check: one wins, one conflicts"""
    command = RegisterCommand(email="a@x.com", password="pw1", full_name="Ann")

    results = await asyncio.gather(
        make_service().register(command),
        make_service().register(command),
    )

    codes = sorted("ok" if r.is_ok() else r.error.code for r in results)
    assert codes == ["EMAIL_ALREADY_EXISTS", "ok"]
    assert len(database.accounts) == 1


@pytest.mark.asyncio
async def test_concurrent_resets_spend_token_once(make_service, database, password_hasher):
    """Two resets racing on one token: exactly one succeeds"""
    service = make_service()
    await service.register(RegisterCommand(email="a@x.com", password="pw1", full_name="Ann"))
    reset_token = (await service.forgot_password(ForgotPasswordCommand(email="a@x.com"))).value.reset_token

    results = await asyncio.gather(
        make_service().reset_password(ResetPasswordCommand(reset_token=reset_token, new_password="pw2")),
        make_service().reset_password(ResetPasswordCommand(reset_token=reset_token, new_password="pw3")),
    )

    codes = sorted("ok" if r.is_ok() else r.error.code for r in results)
    assert codes == ["INVALID_TOKEN", "ok"]
    assert database.password_reset_tokens == {}

    winner = "pw2" if results[0].is_ok() else "pw3"
    account = next(iter(database.accounts.values()))
    assert await password_hasher.verify(winner, account.password_hash)


@pytest.mark.asyncio
async def test_concurrent_rotations_spend_refresh_token_once(make_service, database):
    policy = AuthPolicy(rotate_refresh_tokens=True)
    database.add_refresh_token(RefreshToken(token="r1", user_id=uuid4(), user_email="a@x.com"))

    results = await asyncio.gather(
        make_service(policy).refresh_token(RefreshTokenCommand(refresh_token="r1")),
        make_service(policy).refresh_token(RefreshTokenCommand(refresh_token="r1")),
    )

    codes = sorted("ok" if r.is_ok() else r.error.code for r in results)
    assert codes == ["INVALID_TOKEN", "ok"]
    assert len(database.refresh_tokens) == 1


@pytest.mark.asyncio
async def test_reset_token_is_single_use(service):
    await service.register(RegisterCommand(email="a@x.com", password="pw1", full_name="Ann"))
    reset_token = (await service.forgot_password(ForgotPasswordCommand(email="a@x.com"))).value.reset_token

    first = await service.reset_password(ResetPasswordCommand(reset_token=reset_token, new_password="pw2"))
    second = await service.reset_password(ResetPasswordCommand(reset_token=reset_token, new_password="pw3"))

    assert first.is_ok()
    assert second.is_err()
    assert second.error.code == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_validate_credentials_never_mutates_store(service, database):
    await service.register(RegisterCommand(email="a@x.com", password="pw1", full_name="Ann"))
    before = dump(database)

    for email, password in [("a@x.com", "pw1"), ("a@x.com", "bad"), ("ghost@x.com", "pw1")]:
        result = await service.validate_credentials(
            ValidateCredentialsCommand(email=email, password=password)
        )
        assert result.is_ok()
        assert "token" not in result.value.model_dump()

    assert dump(database) == before


@pytest.mark.asyncio
async def test_refresh_without_rotation_keeps_token(service, database, token_service):
    account_id = uuid4()
    database.add_refresh_token(RefreshToken(token="r1", user_id=account_id, user_email="a@x.com"))

    first = await service.refresh_token(RefreshTokenCommand(refresh_token="r1"))
    second = await service.refresh_token(RefreshTokenCommand(refresh_token="r1"))

    assert first.is_ok() and second.is_ok()
    assert token_service.verify_session_token(first.value.token)["id"] == str(account_id)
    assert "r1" in database.refresh_tokens


@pytest.mark.asyncio
async def test_refresh_with_rotation_refuses_old_token(make_service, database):
    service = make_service(AuthPolicy(rotate_refresh_tokens=True))
    database.add_refresh_token(RefreshToken(token="r1", user_id=uuid4(), user_email="a@x.com"))

    first = await service.refresh_token(RefreshTokenCommand(refresh_token="r1"))
    replay = await service.refresh_token(RefreshTokenCommand(refresh_token="r1"))

    assert first.is_ok()
    new_refresh = first.value.refresh_token
    assert new_refresh in database.refresh_tokens
    assert replay.is_err()
    assert replay.error.code == "INVALID_TOKEN"

    rotated = await service.refresh_token(RefreshTokenCommand(refresh_token=new_refresh))
    assert rotated.is_ok()


@pytest.mark.asyncio
async def test_gated_forgot_password_persists_nothing(make_service, database):
    service = make_service(AuthPolicy(reset_requires_account=True))

    result = await service.forgot_password(ForgotPasswordCommand(email="ghost@x.com"))

    assert result.is_ok()
    assert database.password_reset_tokens == {}


@pytest.mark.asyncio
async def test_two_factor_status(service, database):
    account_id = uuid4()
    assert (await service.get_two_factor_status(account_id)).value.enabled is False

    database.enable_two_factor(account_id)
    assert (await service.get_two_factor_status(account_id)).value.enabled is True


@pytest.mark.asyncio
async def test_logout(service):
    result = await service.logout()
    assert result.is_ok()


@pytest.mark.asyncio
async def test_dependency_failure_is_classified(mock_uow, password_hasher, token_service, caplog):
    """Store errors are logged in full but surface only as DEPENDENCY_ERROR"""
    mock_uow.accounts.get_by_email.side_effect = RuntimeError("connection refused: db.internal:5432")
    service = AuthService(mock_uow, password_hasher, token_service)

    result = await service.login(LoginCommand(email="a@x.com", password="pw1"))

    assert result.is_err()
    assert result.error.code == "DEPENDENCY_ERROR"
    assert "db.internal" not in result.error.message
    assert "connection refused" in caplog.text


@pytest.mark.asyncio
async def test_slow_store_times_out(mock_uow, password_hasher, token_service):
    async def hang(*args):
        await asyncio.sleep(5)

    mock_uow.accounts.get_by_id.side_effect = hang
    service = AuthService(
        mock_uow, password_hasher, token_service, AuthPolicy(store_timeout_seconds=0.05)
    )

    result = await service.get_profile(uuid4())

    assert result.is_err()
    assert result.error.code == "TIMEOUT"


@pytest.mark.asyncio
async def test_deadline_applies_per_store_round_trip(mock_uow, password_hasher, token_service):
    """Three round-trips each under the deadline succeed though their sum is over it"""

    async def slow_lookup(email):
        await asyncio.sleep(0.1)
        return None

    async def slow_create(account):
        await asyncio.sleep(0.1)
        return account

    async def slow_commit():
        await asyncio.sleep(0.1)

    mock_uow.accounts.get_by_email.side_effect = slow_lookup
    mock_uow.accounts.create.side_effect = slow_create
    mock_uow.commit.side_effect = slow_commit
    service = AuthService(
        mock_uow, password_hasher, token_service, AuthPolicy(store_timeout_seconds=0.2)
    )

    result = await service.register(RegisterCommand(email="a@x.com", password="pw1", full_name="Ann"))

    assert result.is_ok()

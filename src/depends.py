from datetime import timedelta
from typing import Optional
from uuid import UUID

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.in_memory_unit_of_work import InMemoryDatabase, InMemoryUnitOfWork
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.auth_service import AuthPolicy, AuthService
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService
from src.domain.entities import ErrorCode

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

memory_database = InMemoryDatabase()

# Process-wide, immutable collaborators shared by every request
password_hasher = PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)
token_service = TokenService(
    secret=ApplicationConfig.JWT_SECRET,
    algorithm=ApplicationConfig.JWT_ALGORITHM,
    session_ttl=timedelta(hours=ApplicationConfig.SESSION_TOKEN_TTL_HOURS),
    reset_ttl=timedelta(minutes=ApplicationConfig.RESET_TOKEN_TTL_MINUTES),
)
auth_policy = AuthPolicy.from_config(ApplicationConfig)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    if ApplicationConfig.STORE_BACKEND == "memory":
        yield InMemoryUnitOfWork(memory_database)
        return
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_token_service() -> TokenService:
    return token_service


async def get_auth_service(uow=Depends(get_unit_of_work)) -> AuthService:
    return AuthService(uow, password_hasher, token_service, auth_policy)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> dict:
    """
    Dependency to extract and verify the session token from the Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing id and email

    Raises:
        ClientError: 401 if the token is missing, 403 if it is invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error(ErrorCode.INVALID_CREDENTIALS.value, "Authentication token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = tokens.verify_session_token(credentials.credentials)
    if payload is None:
        raise ClientError(
            Error(ErrorCode.INVALID_TOKEN.value, "Invalid or expired token"),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    try:
        payload["id"] = UUID(payload["id"])
    except ValueError:
        raise ClientError(
            Error(ErrorCode.INVALID_TOKEN.value, "Invalid or expired token"),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    return payload

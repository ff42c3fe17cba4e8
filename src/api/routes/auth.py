from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.app.services.auth_service import AuthService
from src.app.use_cases.auth import (
    AuthResponse,
    ForgotPasswordCommand,
    ForgotPasswordResponse,
    LoginCommand,
    MessageResponse,
    RefreshTokenCommand,
    RefreshTokenResponse,
    RegisterCommand,
    ResetPasswordCommand,
    ValidateCredentialsCommand,
    ValidateCredentialsResponse,
)
from src.app.use_cases.users import ProfileResponse, TwoFactorStatusResponse
from src.depends import get_auth_service, get_current_user

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    API layer responsibility: HTTP validation and serialization.
    """

    email: str = Field(..., min_length=1, description="Account email address")
    password: str = Field(..., min_length=1, description="Account password")
    fullname: str = Field(..., min_length=1, max_length=255, description="Full name")


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
async def register(
    request: RegisterRequest, auth_service: AuthService = Depends(get_auth_service)
):
    """
    Register a new account

    Creates the account and returns its public fields with a session token.

    Raises:
        - 400 Bad Request: Missing or empty fields
        - 409 Conflict: Email already registered
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        email=request.email, password=request.password, full_name=request.fullname
    )

    result = await auth_service.register(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: str = Field(..., min_length=1, description="Account email address")
    password: str = Field(..., min_length=1, description="Account password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(request: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    """
    Login

    Raises:
        - 400 Bad Request: Missing or empty fields
        - 401 Unauthorized: Invalid credentials (same response for unknown email)
        - 500 Internal Server Error: Server error
    """
    result = await auth_service.login(
        LoginCommand(email=request.email, password=request.password)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def logout(
    current_user: dict = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Logout

    Session tokens are stateless; the client is expected to discard its token.

    Raises:
        - 401 Unauthorized: Missing token
        - 403 Forbidden: Invalid or expired token
    """
    result = await auth_service.logout()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class RefreshTokenRequest(BaseModel):
    """Refresh token HTTP request payload"""

    refresh_token: str = Field(
        ..., alias="refreshToken", min_length=1, description="Refresh token"
    )


@router.post(
    "/refresh-token",
    status_code=status.HTTP_200_OK,
    response_model=RefreshTokenResponse,
    response_model_exclude_none=True,
)
async def refresh_token(
    request: RefreshTokenRequest, auth_service: AuthService = Depends(get_auth_service)
):
    """
    Refresh Session Token

    Exchanges a stored refresh token for a new session token. When refresh
    token rotation is enabled the response also carries the replacement
    refresh token.

    Raises:
        - 400 Bad Request: Missing refresh token
        - 403 Forbidden: Unknown refresh token
        - 500 Internal Server Error: Server error
    """
    result = await auth_service.refresh_token(
        RefreshTokenCommand(refresh_token=request.refresh_token)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    """Forgot password HTTP request payload"""

    email: str = Field(..., min_length=1, description="Account email address")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=ForgotPasswordResponse,
    response_model_exclude_none=True,
)
async def forgot_password(
    request: ForgotPasswordRequest, auth_service: AuthService = Depends(get_auth_service)
):
    """
    Forgot Password

    Issues a password reset token valid for 1 hour. The token is included in
    the response only when EXPOSE_RESET_TOKEN is enabled.

    Returns:
        - 200 OK: Confirmation message
        - 400 Bad Request: Missing or empty email
        - 500 Internal Server Error: Server error
    """
    result = await auth_service.forgot_password(ForgotPasswordCommand(email=request.email))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    reset_token: str = Field(
        ..., alias="resetToken", min_length=1, description="Password reset token"
    )
    new_password: str = Field(
        ..., alias="newPassword", min_length=1, description="New password"
    )


@router.post("/reset-password", status_code=status.HTTP_200_OK, response_model=MessageResponse)
async def reset_password(
    request: ResetPasswordRequest, auth_service: AuthService = Depends(get_auth_service)
):
    """
    Reset Password

    Consumes a reset token (single use) and sets the new password.

    Raises:
        - 400 Bad Request: Missing fields
        - 403 Forbidden: Invalid, expired or already used token
        - 500 Internal Server Error: Server error
    """
    result = await auth_service.reset_password(
        ResetPasswordCommand(
            reset_token=request.reset_token, new_password=request.new_password
        )
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ValidateCredentialsRequest(BaseModel):
    """Validate credentials HTTP request payload"""

    email: str = Field(..., min_length=1, description="Account email address")
    password: str = Field(..., min_length=1, description="Account password")


@router.post(
    "/validate-credentials",
    status_code=status.HTTP_200_OK,
    response_model=ValidateCredentialsResponse,
)
async def validate_credentials(
    request: ValidateCredentialsRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Validate Credentials

    Boolean check; never issues a token.

    Returns:
        - 200 OK: {"valid": true|false}
        - 400 Bad Request: Missing or empty fields
        - 500 Internal Server Error: Server error
    """
    result = await auth_service.validate_credentials(
        ValidateCredentialsCommand(email=request.email, password=request.password)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/profile", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_profile(
    current_user: dict = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Current Account Profile

    Raises:
        - 401 Unauthorized: Missing token
        - 403 Forbidden: Invalid or expired token
        - 404 Not Found: Account no longer exists
        - 500 Internal Server Error: Server error
    """
    result = await auth_service.get_profile(current_user["id"])

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/2fa", status_code=status.HTTP_200_OK, response_model=TwoFactorStatusResponse)
async def get_two_factor_status(
    current_user: dict = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Two-Factor Authentication Status

    Raises:
        - 401 Unauthorized: Missing token
        - 403 Forbidden: Invalid or expired token
        - 500 Internal Server Error: Server error
    """
    result = await auth_service.get_two_factor_status(current_user["id"])

    if result.is_err():
        raise_for_error(result.error)

    return result.value

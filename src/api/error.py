from fastapi import status
from libs.result import Error

from src.domain.entities import ErrorCode


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


CLIENT_ERROR_STATUS = {
    ErrorCode.INVALID_INPUT.value: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EMAIL_ALREADY_EXISTS.value: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_CREDENTIALS.value: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN.value: status.HTTP_403_FORBIDDEN,
    ErrorCode.USER_NOT_FOUND.value: status.HTTP_404_NOT_FOUND,
}


def raise_for_error(error: Error) -> None:
    """Raise the ClientError or ServerError matching an operation's error code"""
    if error.code in CLIENT_ERROR_STATUS:
        raise ClientError(error, status_code=CLIENT_ERROR_STATUS[error.code])
    if error.code == ErrorCode.TIMEOUT.value:
        raise ServerError(error, status_code=status.HTTP_504_GATEWAY_TIMEOUT)
    raise ServerError(error)

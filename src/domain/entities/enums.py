"""
Auth Service Domain Enums

All enumeration types used across the domain.
"""

from enum import Enum


class TokenType(str, Enum):
    """Value of the `type` claim carried by every signed token"""

    session = "session"
    password_reset = "password_reset"


class ErrorCode(str, Enum):
    """Failure classification returned by every auth operation"""

    INVALID_INPUT = "INVALID_INPUT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    DEPENDENCY_ERROR = "DEPENDENCY_ERROR"
    TIMEOUT = "TIMEOUT"

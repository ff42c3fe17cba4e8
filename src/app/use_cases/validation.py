from typing import Optional

from libs.result import Error, Result, Return
from src.domain.entities import ErrorCode


def require_non_empty(**fields: Optional[str]) -> Result[None]:
    """
    Check that every named field is a non-empty string.

    Returns:
        Result with None if all fields are present, or INVALID_INPUT naming the missing ones
    """
    missing = [
        name for name, value in fields.items() if not isinstance(value, str) or not value
    ]
    if missing:
        return Return.err(
            Error(
                ErrorCode.INVALID_INPUT.value,
                f"Missing required fields: {', '.join(missing)}",
            )
        )
    return Return.ok(None)

"""
RefreshToken Entity

Long-lived opaque bearer values exchanged for new session tokens.
"""

from datetime import UTC, datetime
from uuid import UUID

from sqlmodel import Column, DateTime, Field, SQLModel


class RefreshToken(SQLModel, table=True):
    """
    RefreshToken entity - opaque bearer value bound to an account.

    Business Rules:
    - Issued out-of-band; the service only looks them up
    - Must exist in the store to be honored
    - Deleted only when refresh token rotation is enabled
    """

    __tablename__ = "refresh_tokens"

    token: str = Field(primary_key=True, max_length=512)
    user_id: UUID = Field(index=True)
    user_email: str = Field(max_length=255)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime(timezone=True))
    )

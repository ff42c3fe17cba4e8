"""
PasswordResetToken Entity

Single-use password reset tokens.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - single-use password reset tokens.

    Business Rules:
    - token is a signed JWT embedding the target email (1 hour expiry)
    - Expiry lives in the signature, not in this row
    - Single-use: the row is deleted after a successful reset
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    email: str = Field(index=True, max_length=255)
    token: str = Field(unique=True, index=True, max_length=1024)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime(timezone=True))
    )

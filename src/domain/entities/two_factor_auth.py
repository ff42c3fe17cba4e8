"""
TwoFactorAuth Entity

Presence of a row means two-factor authentication is enabled for the account.
Rows are created and removed by the enrollment flow, which lives elsewhere.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class TwoFactorAuth(SQLModel, table=True):
    __tablename__ = "two_factor_auth"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(unique=True, index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime(timezone=True))
    )

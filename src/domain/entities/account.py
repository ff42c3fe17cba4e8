"""
Account Entity

Represents a person who can authenticate against the service.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class Account(SQLModel, table=True):
    """
    Account entity - a single login identity.

    Business Rules:
    - Email must be unique across all accounts (DB constraint is the backstop)
    - Password stored as bcrypt hash, never plaintext
    - id is immutable once issued
    - password_hash only changes through a password reset
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    full_name: str = Field(max_length=255)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime(timezone=True))
    )

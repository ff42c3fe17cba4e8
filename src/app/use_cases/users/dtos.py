from datetime import datetime
from pydantic import BaseModel


class ProfileResponse(BaseModel):
    """Public projection of an account"""

    id: str
    email: str
    fullname: str
    created_at: datetime


class TwoFactorStatusResponse(BaseModel):
    enabled: bool

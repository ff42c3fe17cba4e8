from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from jose import JWTError, jwt

from src.domain.entities import TokenType


class TokenService:
    """
    Signed token primitive (JWT via python-jose).

    Session tokens carry the account id and email and expire after
    `session_ttl`. Password reset tokens carry only the email and expire
    after `reset_ttl`. A `type` claim keeps the two kinds from being
    swapped for one another.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        session_ttl: timedelta = timedelta(hours=24),
        reset_ttl: timedelta = timedelta(hours=1),
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.session_ttl = session_ttl
        self.reset_ttl = reset_ttl

    def _encode(self, claims: dict, expires_delta: timedelta, now: Optional[datetime]) -> str:
        issued_at = now or datetime.now(UTC)
        payload = {
            **claims,
            "jti": uuid4().hex,
            "iat": issued_at,
            "exp": issued_at + expires_delta,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def issue_session_token(
        self, account_id: UUID, email: str, now: Optional[datetime] = None
    ) -> str:
        """
        Create a session token

        Args:
            account_id: Account UUID
            email: Account email
            now: Issue time, defaults to the current UTC time

        Returns:
            JWT token string
        """
        claims = {
            "id": str(account_id),
            "email": email,
            "type": TokenType.session.value,
        }
        return self._encode(claims, self.session_ttl, now)

    def issue_reset_token(self, email: str, now: Optional[datetime] = None) -> str:
        """Create a password reset token embedding email"""
        claims = {"email": email, "type": TokenType.password_reset.value}
        return self._encode(claims, self.reset_ttl, now)

    def decode(
        self,
        token: str,
        expected_type: TokenType,
        now: Optional[datetime] = None,
    ) -> Optional[dict]:
        """
        Verify and decode a token

        Args:
            token: JWT token string
            expected_type: Required value of the `type` claim
            now: Verification time, defaults to the current time

        Returns:
            Decoded payload dict or None if invalid, expired or of another type
        """
        try:
            if now is None:
                payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
            else:
                payload = jwt.decode(
                    token,
                    self.secret,
                    algorithms=[self.algorithm],
                    options={"verify_exp": False},
                )
        except JWTError:
            return None

        if now is not None:
            exp = payload.get("exp")
            if exp is None or now.timestamp() >= exp:
                return None

        if payload.get("type") != expected_type.value:
            return None

        return payload

    def verify_session_token(self, token: str, now: Optional[datetime] = None) -> Optional[dict]:
        payload = self.decode(token, TokenType.session, now)
        if payload is None or not payload.get("id") or not payload.get("email"):
            return None
        return payload

    def verify_reset_token(self, token: str, now: Optional[datetime] = None) -> Optional[dict]:
        payload = self.decode(token, TokenType.password_reset, now)
        if payload is None or not payload.get("email"):
            return None
        return payload

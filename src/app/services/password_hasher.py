"""
Password Hasher

bcrypt hashing with a configurable cost factor. Hashing is deliberately slow,
so both operations are pushed onto the thread pool and never run on the
event loop.
"""

import bcrypt
from starlette.concurrency import run_in_threadpool


class PasswordHasher:
    """
    Salted one-way password hashing.

    Business Rules:
    - bcrypt with cost factor `rounds` (10 unless configured otherwise)
    - A fresh salt per hash, so equal passwords never share a hash
    - Comparison goes through bcrypt.checkpw (constant time)
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        # Used to equalize timing when no account matches
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    def _hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(self.rounds)).decode("utf-8")

    def _verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            # Malformed stored hash
            return False

    async def hash(self, password: str) -> str:
        """Return the bcrypt hash of password"""
        return await run_in_threadpool(self._hash, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        """Return True if password matches password_hash"""
        return await run_in_threadpool(self._verify, password, password_hash)

    async def burn(self, password: str) -> None:
        """Spend one comparison's worth of time against a dummy hash"""
        await run_in_threadpool(bcrypt.checkpw, password.encode("utf-8"), self._dummy_hash)

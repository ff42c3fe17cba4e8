"""
Deadline Unit of Work

Wraps any UnitOfWork so that every store round-trip (repository call,
commit, rollback) is bounded by the same timeout. Expiry raises
asyncio.TimeoutError out of the use case; AuthService classifies it.
"""

import asyncio

from src.app.services.unit_of_work import UnitOfWork


class _DeadlineRepository:
    def __init__(self, repository, timeout: float):
        self._repository = repository
        self._timeout = timeout

    def __getattr__(self, name):
        method = getattr(self._repository, name)

        async def bounded(*args, **kwargs):
            return await asyncio.wait_for(method(*args, **kwargs), timeout=self._timeout)

        return bounded


class DeadlineUnitOfWork(UnitOfWork):
    """UnitOfWork decorator applying a per round-trip deadline"""

    def __init__(self, inner: UnitOfWork, timeout: float):
        self.inner = inner
        self.timeout = timeout

    async def _bounded(self, awaitable):
        return await asyncio.wait_for(awaitable, timeout=self.timeout)

    async def __aenter__(self):
        await self._bounded(self.inner.__aenter__())

        self.accounts = _DeadlineRepository(self.inner.accounts, self.timeout)
        self.refresh_tokens = _DeadlineRepository(self.inner.refresh_tokens, self.timeout)
        self.password_reset_tokens = _DeadlineRepository(
            self.inner.password_reset_tokens, self.timeout
        )
        self.two_factor = _DeadlineRepository(self.inner.two_factor, self.timeout)
        return self

    async def __aexit__(self, *args):
        return await self._bounded(self.inner.__aexit__(*args))

    async def commit(self):
        await self._bounded(self.inner.commit())

    async def rollback(self):
        await self._bounded(self.inner.rollback())

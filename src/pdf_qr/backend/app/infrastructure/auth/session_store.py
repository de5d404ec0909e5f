from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Optional

from pdf_qr.backend.app.domain.auth import Session
from pdf_qr.backend.app.domain.common import utcnow

logger = logging.getLogger(__name__)


class InMemorySessionStore:
    """
    Process-local session table for single-instance deployments.

    Every access goes through one asyncio.Lock. Expired entries are dropped
    lazily on lookup and in bulk by purge_expired().
    """

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}
        self._lock = asyncio.Lock()

    async def create(self, session: Session) -> Session:
        async with self._lock:
            self._sessions[session.token] = session
        return session

    async def get(self, token: str, *, now: datetime) -> Optional[Session]:
        async with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if session.is_expired(now):
                del self._sessions[token]
                return None
            return session

    async def invalidate(self, token: str) -> None:
        async with self._lock:
            self._sessions.pop(token, None)

    async def purge_expired(self, now: datetime) -> int:
        async with self._lock:
            expired = [t for t, s in self._sessions.items() if s.is_expired(now)]
            for token in expired:
                del self._sessions[token]
            return len(expired)

    def __len__(self) -> int:
        return len(self._sessions)


async def purge_expired_sessions_forever(
    store: InMemorySessionStore,
    interval_s: float = 3600.0,
) -> None:
    while True:
        await asyncio.sleep(interval_s)
        purged = await store.purge_expired(utcnow())
        if purged:
            logger.info("Purged %d expired session(s)", purged)

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from pdf_qr.backend.app.application.auth import SessionDTO
from pdf_qr.backend.app.domain.auth import NotAuthenticated, SessionStore
from pdf_qr.backend.app.domain.common import utcnow


class AuthenticateSessionUseCase:
    """
    Resolves a bearer token to a live session.

    Sessions expire a fixed TTL after login; using a session does not
    extend it.
    """

    def __init__(
        self,
        session_store: SessionStore,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._session_store = session_store
        self._clock = clock

    async def execute(self, token: Optional[str]) -> SessionDTO:
        if not token:
            raise NotAuthenticated()
        session = await self._session_store.get(token, now=self._clock())
        if session is None:
            raise NotAuthenticated()
        return SessionDTO(username=session.username, expires_at=session.expires_at)

from typing import Optional

from pdf_qr.backend.app.domain.auth import SessionStore


class LogoutUseCase:
    def __init__(self, session_store: SessionStore) -> None:
        self._session_store = session_store

    async def execute(self, token: Optional[str]) -> None:
        if token:
            await self._session_store.invalidate(token)

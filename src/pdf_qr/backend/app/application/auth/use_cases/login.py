from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta
from typing import Callable

from pdf_qr.backend.app.application.auth import LoginInputDTO, LoginOutputDTO
from pdf_qr.backend.app.application.auth.interfaces import PasswordHasher
from pdf_qr.backend.app.domain.auth import (
    InvalidCredentialsError,
    MissingCredentials,
    Session,
    SessionStore,
)
from pdf_qr.backend.app.domain.auth.value_objects import AdminCredentials
from pdf_qr.backend.app.domain.common import utcnow

logger = logging.getLogger(__name__)


def new_session_token() -> str:
    return secrets.token_urlsafe(32)


class LoginUseCase:
    def __init__(
        self,
        credentials: AdminCredentials,
        password_hasher: PasswordHasher,
        session_store: SessionStore,
        *,
        session_ttl: timedelta = timedelta(hours=24),
        issue_sessions: bool = True,
        clock: Callable[[], datetime] = utcnow,
        token_factory: Callable[[], str] = new_session_token,
    ) -> None:
        self._credentials = credentials
        self._password_hasher = password_hasher
        self._session_store = session_store
        self._session_ttl = session_ttl
        self._issue_sessions = issue_sessions
        self._clock = clock
        self._token_factory = token_factory

    async def execute(self, dto: LoginInputDTO) -> LoginOutputDTO:
        username = dto.username or ""
        password = dto.password or ""
        if not username or not password:
            raise MissingCredentials()

        # 1) username, constant time
        username_ok = secrets.compare_digest(
            username.encode("utf-8"), self._credentials.username.encode("utf-8")
        )
        # 2) password, checked even when the username is wrong
        password_ok = bool(self._credentials.password_hash) and self._password_hasher.verify(
            password, self._credentials.password_hash
        )
        if not (username_ok and password_ok):
            logger.warning("Failed admin login for username %r", username)
            raise InvalidCredentialsError()

        if not self._issue_sessions:
            return LoginOutputDTO(username=username)

        now = self._clock()
        session = await self._session_store.create(
            Session(
                token=self._token_factory(),
                username=username,
                created_at=now,
                expires_at=now + self._session_ttl,
            )
        )
        logger.info("Admin %s logged in, session expires at %s", username, session.expires_at.isoformat())
        return LoginOutputDTO(
            username=username,
            token=session.token,
            expires_at=session.expires_at,
        )

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from .entities import Session


class SessionStore(Protocol):
    async def create(self, session: Session) -> Session:
        ...

    async def get(self, token: str, *, now: datetime) -> Optional[Session]:
        """Returns None for unknown or expired tokens."""
        ...

    async def invalidate(self, token: str) -> None:
        ...

    async def purge_expired(self, now: datetime) -> int:
        ...

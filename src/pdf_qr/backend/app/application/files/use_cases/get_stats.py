from __future__ import annotations

from datetime import datetime
from typing import Callable

from pdf_qr.backend.app.application.files.dto import StatsDTO
from pdf_qr.backend.app.application.files.mappers import record_to_recent_dto
from pdf_qr.backend.app.domain.common import utcnow
from pdf_qr.backend.app.domain.common.uow import UnitOfWork


def start_of_local_day(now: datetime) -> datetime:
    """Midnight of `now`'s calendar day in the server's local timezone."""
    local = now.astimezone()
    return local.replace(hour=0, minute=0, second=0, microsecond=0)


class GetStatsUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        clock: Callable[[], datetime] = utcnow,
        recent_limit: int = 5,
    ) -> None:
        self._uow = uow
        self._clock = clock
        self._recent_limit = recent_limit

    async def execute(self) -> StatsDTO:
        today_start = start_of_local_day(self._clock())
        async with self._uow:
            repo = self._uow.file_repo
            total_files = await repo.count()
            total_downloads = await repo.total_downloads()
            today_uploads = await repo.count_uploaded_since(today_start)
            recent = await repo.recent(self._recent_limit)

        return StatsDTO(
            total_files=total_files,
            total_downloads=total_downloads or 0,
            today_uploads=today_uploads,
            recent_files=[record_to_recent_dto(r) for r in recent],
        )

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Sequence

from sqlalchemy import delete as sa_delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pdf_qr.backend.app.domain.files import FileRecord
from pdf_qr.backend.app.domain.files.errors import DuplicateFileId
from pdf_qr.backend.app.infrastructure.db.models.file_record import FileRecordModel
from pdf_qr.backend.app.infrastructure.files.mappers import (
    file_record_domain_to_model,
    file_record_model_to_domain,
)


class SqlAlchemyFileRecordRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, record: FileRecord) -> FileRecord:
        model = file_record_domain_to_model(record)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            # primary key (id) or one of the unique storage paths
            raise DuplicateFileId(record.id) from e
        return file_record_model_to_domain(model)

    async def get_by_id(self, file_id: str) -> Optional[FileRecord]:
        stmt = (
            select(FileRecordModel)
            .where(FileRecordModel.id == file_id)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model: Optional[FileRecordModel] = result.scalar_one_or_none()
        if model is None:
            return None
        return file_record_model_to_domain(model)

    async def register_download(self, file_id: str, accessed_at: datetime) -> None:
        # increment in SQL so concurrent downloads are not lost
        await self._session.execute(
            update(FileRecordModel)
            .where(FileRecordModel.id == file_id)
            .values(
                download_count=FileRecordModel.download_count + 1,
                last_accessed=accessed_at,
            )
        )
        await self._session.flush()

    async def delete(self, file_id: str) -> None:
        await self._session.execute(
            sa_delete(FileRecordModel)
            .where(FileRecordModel.id == file_id)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()

    async def list_page(self, *, offset: int, limit: int) -> Sequence[FileRecord]:
        stmt = (
            select(FileRecordModel)
            .order_by(FileRecordModel.upload_date.desc(), FileRecordModel.id.desc())
            .offset(offset)
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        res = await self._session.execute(stmt)
        return [file_record_model_to_domain(m) for m in res.scalars().all()]

    async def count(self) -> int:
        res = await self._session.execute(select(func.count()).select_from(FileRecordModel))
        return int(res.scalar_one())

    async def total_downloads(self) -> int:
        res = await self._session.execute(
            select(func.coalesce(func.sum(FileRecordModel.download_count), 0))
        )
        return int(res.scalar_one())

    async def count_uploaded_since(self, since: datetime) -> int:
        stmt = (
            select(func.count())
            .select_from(FileRecordModel)
            .where(FileRecordModel.upload_date >= since.astimezone(timezone.utc))
        )
        res = await self._session.execute(stmt)
        return int(res.scalar_one())

    async def recent(self, limit: int) -> Sequence[FileRecord]:
        return await self.list_page(offset=0, limit=limit)

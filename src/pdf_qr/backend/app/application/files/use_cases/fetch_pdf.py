from __future__ import annotations

import logging

from pdf_qr.backend.app.application.files.dto import FileIdInputDTO, PdfDownloadDTO
from pdf_qr.backend.app.domain.common import utcnow
from pdf_qr.backend.app.domain.common.uow import UnitOfWork
from pdf_qr.backend.app.domain.files.errors import FileRecordNotFound, StoredFileMissing
from pdf_qr.backend.app.domain.files.interfaces import FileStorage

logger = logging.getLogger(__name__)


class FetchPdfUseCase:
    def __init__(self, uow: UnitOfWork, file_storage: FileStorage) -> None:
        self._uow = uow
        self._file_storage = file_storage

    async def execute(self, dto: FileIdInputDTO) -> PdfDownloadDTO:
        async with self._uow:
            record = await self._uow.file_repo.get_by_id(dto.file_id)
            if record is None:
                raise FileRecordNotFound(dto.file_id)
            if not await self._file_storage.exists(record.storage_path):
                raise StoredFileMissing(dto.file_id)

        # accounting is best-effort: a failed save must not block the download
        now = utcnow()
        try:
            async with self._uow:
                await self._uow.file_repo.register_download(record.id, now)
            record.register_download(now)
        except Exception:
            logger.warning("Could not record download of %s", record.id, exc_info=True)

        return PdfDownloadDTO(
            path=self._file_storage.resolve(record.storage_path),
            original_name=record.original_name,
            download_count=record.download_count,
        )

from __future__ import annotations

import logging

from pdf_qr.backend.app.application.files.dto import FileIdInputDTO
from pdf_qr.backend.app.domain.common.uow import UnitOfWork
from pdf_qr.backend.app.domain.files.errors import FailedToDeleteFile, FileRecordNotFound
from pdf_qr.backend.app.domain.files.interfaces import FileStorage

logger = logging.getLogger(__name__)


class DeleteFileUseCase:
    def __init__(self, uow: UnitOfWork, file_storage: FileStorage) -> None:
        self._uow = uow
        self._file_storage = file_storage

    async def execute(self, dto: FileIdInputDTO) -> None:
        async with self._uow:
            record = await self._uow.file_repo.get_by_id(dto.file_id)
            if record is None:
                raise FileRecordNotFound(dto.file_id)

            # each removal on its own; a leftover file must not keep the record alive
            for path in (record.storage_path, record.code_image_path):
                try:
                    await self._file_storage.delete(path)
                except Exception:
                    logger.warning("Could not remove %s for file %s", path, record.id, exc_info=True)

            try:
                await self._uow.file_repo.delete(record.id)
            except Exception as e:
                raise FailedToDeleteFile(record.id) from e

        logger.info("Deleted file %s (%s)", record.id, record.original_name)

from pdf_qr.backend.app.application.files.dto import CodeImageDTO, FileIdInputDTO
from pdf_qr.backend.app.domain.common.uow import UnitOfWork
from pdf_qr.backend.app.domain.files.errors import CodeImageMissing, FileRecordNotFound
from pdf_qr.backend.app.domain.files.interfaces import FileStorage


class FetchCodeImageUseCase:
    def __init__(self, uow: UnitOfWork, file_storage: FileStorage) -> None:
        self._uow = uow
        self._file_storage = file_storage

    async def execute(self, dto: FileIdInputDTO) -> CodeImageDTO:
        async with self._uow:
            record = await self._uow.file_repo.get_by_id(dto.file_id)
            if record is None:
                raise FileRecordNotFound(dto.file_id)
            if not await self._file_storage.exists(record.code_image_path):
                raise CodeImageMissing(dto.file_id)
            return CodeImageDTO(path=self._file_storage.resolve(record.code_image_path))

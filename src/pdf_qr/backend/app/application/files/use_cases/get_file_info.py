from pdf_qr.backend.app.application.files.dto import FileIdInputDTO, FileInfoDTO
from pdf_qr.backend.app.application.files.mappers import record_to_info_dto
from pdf_qr.backend.app.domain.common.uow import UnitOfWork
from pdf_qr.backend.app.domain.files.errors import FileRecordNotFound


class GetFileInfoUseCase:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, dto: FileIdInputDTO) -> FileInfoDTO:
        async with self._uow:
            record = await self._uow.file_repo.get_by_id(dto.file_id)
            if record is None:
                raise FileRecordNotFound(dto.file_id)
            return record_to_info_dto(record)

from __future__ import annotations

import math

from pdf_qr.backend.app.application.files.dto import FileListDTO, ListFilesInputDTO, PaginationDTO
from pdf_qr.backend.app.application.files.mappers import record_to_list_item_dto
from pdf_qr.backend.app.domain.common.uow import UnitOfWork

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class ListFilesUseCase:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    async def execute(self, dto: ListFilesInputDTO) -> FileListDTO:
        # out-of-range paging is clamped, never rejected
        page = max(dto.page, 1)
        limit = DEFAULT_PAGE_SIZE if dto.limit < 1 else min(dto.limit, MAX_PAGE_SIZE)
        async with self._uow:
            records = await self._uow.file_repo.list_page(offset=(page - 1) * limit, limit=limit)
            total = await self._uow.file_repo.count()

        return FileListDTO(
            files=[record_to_list_item_dto(r, dto.origin) for r in records],
            pagination=PaginationDTO(
                page=page,
                limit=limit,
                total=total,
                pages=math.ceil(total / limit),
            ),
        )

from typing import Annotated

from fastapi import Depends

from pdf_qr.backend.app.application.files.use_cases import (
    DeleteFileUseCase,
    FetchCodeImageUseCase,
    FetchPdfUseCase,
    GetFileInfoUseCase,
    GetStatsUseCase,
    ListFilesUseCase,
    UploadFilesUseCase,
)
from pdf_qr.backend.app.core.deps import (
    ContainerDep,
    get_code_image_generator,
    get_file_storage,
    get_id_generator,
    get_uow,
)
from pdf_qr.backend.app.domain.common.uow import UnitOfWork
from pdf_qr.backend.app.domain.files.interfaces import CodeImageGenerator, FileStorage, IdGenerator

uow_dep = Annotated[UnitOfWork, Depends(get_uow)]
storage_dep = Annotated[FileStorage, Depends(get_file_storage)]


async def get_upload_files_use_case(
        container: ContainerDep,
        uow: uow_dep,
        storage: storage_dep,
        code_images: Annotated[CodeImageGenerator, Depends(get_code_image_generator)],
        ids: Annotated[IdGenerator, Depends(get_id_generator)],
) -> UploadFilesUseCase:
    return UploadFilesUseCase(uow, storage, code_images, ids, limits=container.upload_limits)


async def get_fetch_pdf_use_case(uow: uow_dep, storage: storage_dep) -> FetchPdfUseCase:
    return FetchPdfUseCase(uow, storage)


async def get_fetch_code_image_use_case(uow: uow_dep, storage: storage_dep) -> FetchCodeImageUseCase:
    return FetchCodeImageUseCase(uow, storage)


async def get_file_info_use_case(uow: uow_dep) -> GetFileInfoUseCase:
    return GetFileInfoUseCase(uow)


async def get_list_files_use_case(uow: uow_dep) -> ListFilesUseCase:
    return ListFilesUseCase(uow)


async def get_stats_use_case(uow: uow_dep) -> GetStatsUseCase:
    return GetStatsUseCase(uow)


async def get_delete_file_use_case(uow: uow_dep, storage: storage_dep) -> DeleteFileUseCase:
    return DeleteFileUseCase(uow, storage)

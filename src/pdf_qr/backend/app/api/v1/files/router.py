from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import FileResponse

from pdf_qr.backend.app.api.v1.auth.deps import require_admin
from pdf_qr.backend.app.api.v1.files.deps import (
    get_delete_file_use_case,
    get_fetch_code_image_use_case,
    get_fetch_pdf_use_case,
    get_file_info_use_case,
    get_list_files_use_case,
    get_stats_use_case,
    get_upload_files_use_case,
)
from pdf_qr.backend.app.api.v1.files.mappers import (
    file_info_dto_to_response,
    file_list_dto_to_response,
    get_upload_input_dto,
    stats_dto_to_response,
    uploaded_dtos_to_response,
)
from pdf_qr.backend.app.api.v1.files.schemas import (
    FileInfoResponse,
    FileListResponse,
    StatsResponse,
    UploadResponse,
)
from pdf_qr.backend.app.api.v1.schemas import MessageResponse
from pdf_qr.backend.app.application.files import FileIdInputDTO, ListFilesInputDTO
from pdf_qr.backend.app.application.files.use_cases import (
    DeleteFileUseCase,
    FetchCodeImageUseCase,
    FetchPdfUseCase,
    GetFileInfoUseCase,
    GetStatsUseCase,
    ListFilesUseCase,
    UploadFilesUseCase,
)
from pdf_qr.backend.app.core.deps import ContainerDep, get_origin

router = APIRouter(tags=["files"])

# admin routes get the gate as a route dependency, public ones do not
admin_router = APIRouter(tags=["files"], dependencies=[Depends(require_admin)])

origin_dep = Annotated[str, Depends(get_origin)]
upload_dep = Annotated[UploadFilesUseCase, Depends(get_upload_files_use_case)]
fetch_pdf_dep = Annotated[FetchPdfUseCase, Depends(get_fetch_pdf_use_case)]
fetch_code_image_dep = Annotated[FetchCodeImageUseCase, Depends(get_fetch_code_image_use_case)]
file_info_dep = Annotated[GetFileInfoUseCase, Depends(get_file_info_use_case)]
list_files_dep = Annotated[ListFilesUseCase, Depends(get_list_files_use_case)]
stats_dep = Annotated[GetStatsUseCase, Depends(get_stats_use_case)]
delete_file_dep = Annotated[DeleteFileUseCase, Depends(get_delete_file_use_case)]


# ---------- admin ----------

@admin_router.get("/files", response_model=FileListResponse)
async def list_files(
        use_case: list_files_dep,
        origin: origin_dep,
        page: Annotated[int, Query()] = 1,
        limit: Annotated[int, Query()] = 10,
):
    listing = await use_case.execute(ListFilesInputDTO(origin=origin, page=page, limit=limit))
    return file_list_dto_to_response(listing)


@admin_router.post("/upload", response_model=UploadResponse)
async def upload_files(
        use_case: upload_dep,
        origin: origin_dep,
        container: ContainerDep,
        pdfs: Annotated[Optional[list[UploadFile]], File()] = None,
):
    files = [f for f in (pdfs or []) if f.filename]
    dto = await get_upload_input_dto(origin, files, container.upload_limits)
    uploaded = await use_case.execute(dto)
    return uploaded_dtos_to_response(uploaded)


@admin_router.delete("/file/{file_id}", response_model=MessageResponse)
async def delete_file(file_id: str, use_case: delete_file_dep):
    await use_case.execute(FileIdInputDTO(file_id=file_id))
    return MessageResponse(message="File deleted")


@admin_router.get("/stats", response_model=StatsResponse)
async def get_stats(use_case: stats_dep):
    stats = await use_case.execute()
    return stats_dto_to_response(stats)


# ---------- public ----------

@router.get("/pdf/{file_id}", response_class=FileResponse)
async def download_pdf(file_id: str, use_case: fetch_pdf_dep):
    download = await use_case.execute(FileIdInputDTO(file_id=file_id))
    return FileResponse(
        path=download.path,
        media_type="application/pdf",
        filename=download.original_name,
        content_disposition_type="inline",
    )


@router.get("/qr/{file_id}", response_class=FileResponse)
async def get_code_image(file_id: str, use_case: fetch_code_image_dep):
    image = await use_case.execute(FileIdInputDTO(file_id=file_id))
    return FileResponse(path=image.path, media_type="image/png")


@router.get("/file-info/{file_id}", response_model=FileInfoResponse)
async def get_file_info(file_id: str, use_case: file_info_dep):
    info = await use_case.execute(FileIdInputDTO(file_id=file_id))
    return file_info_dto_to_response(info)

from __future__ import annotations

from fastapi import UploadFile

from pdf_qr.backend.app.api.v1.files.schemas import (
    FileInfoResponse,
    FileListItemResponse,
    FileListResponse,
    PaginationResponse,
    RecentFileResponse,
    StatsResponse,
    UploadedFileResponse,
    UploadResponse,
)
from pdf_qr.backend.app.application.files import (
    FileInfoDTO,
    FileListDTO,
    IncomingFileDTO,
    StatsDTO,
    UploadedFileDTO,
    UploadFilesInputDTO,
)
from pdf_qr.backend.app.application.files.use_cases import UploadLimits
from pdf_qr.backend.app.domain.files.errors import FileTooLarge, TooManyFiles


async def read_upload(f: UploadFile, max_file_size: int) -> bytes:
    """Reads at most max_file_size bytes; anything larger raises FileTooLarge."""
    name = f.filename or "uploaded.pdf"
    if f.size is not None and f.size > max_file_size:
        raise FileTooLarge(name, max_file_size)
    content = await f.read(max_file_size + 1)
    if len(content) > max_file_size:
        raise FileTooLarge(name, max_file_size)
    return content


async def get_upload_input_dto(
    origin: str,
    files: list[UploadFile],
    limits: UploadLimits,
) -> UploadFilesInputDTO:
    # count and size are checked before a part is buffered
    if len(files) > limits.max_files:
        raise TooManyFiles(limits.max_files)
    incoming = []
    for f in files:
        incoming.append(
            IncomingFileDTO(
                filename=f.filename or "uploaded.pdf",
                content_type=f.content_type or "application/octet-stream",
                content=await read_upload(f, limits.max_file_size),
            )
        )
    return UploadFilesInputDTO(origin=origin, files=incoming)


def uploaded_dtos_to_response(uploaded: list[UploadedFileDTO]) -> UploadResponse:
    return UploadResponse(
        success=True,
        message=f"{len(uploaded)} file(s) uploaded",
        files=[
            UploadedFileResponse(
                id=u.id,
                name=u.name,
                size=u.size,
                qr_code=u.code_image_url,
                download_url=u.download_url,
                upload_date=u.upload_date,
            )
            for u in uploaded
        ],
    )


def file_info_dto_to_response(info: FileInfoDTO) -> FileInfoResponse:
    return FileInfoResponse.model_validate(info)


def file_list_dto_to_response(listing: FileListDTO) -> FileListResponse:
    return FileListResponse(
        files=[
            FileListItemResponse(
                id=f.id,
                original_name=f.original_name,
                file_size=f.file_size,
                upload_date=f.upload_date,
                download_count=f.download_count,
                qr_code=f.code_image_url,
                download_url=f.download_url,
            )
            for f in listing.files
        ],
        pagination=PaginationResponse.model_validate(listing.pagination),
    )


def stats_dto_to_response(stats: StatsDTO) -> StatsResponse:
    return StatsResponse(
        total_files=stats.total_files,
        total_downloads=stats.total_downloads,
        today_uploads=stats.today_uploads,
        recent_files=[RecentFileResponse.model_validate(r) for r in stats.recent_files],
    )

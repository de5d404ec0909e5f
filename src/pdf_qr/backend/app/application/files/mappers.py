from __future__ import annotations

from pathlib import PurePosixPath

from .dto import FileInfoDTO, FileListItemDTO, RecentFileDTO, UploadedFileDTO
from pdf_qr.backend.app.domain.files import FileRecord

DOWNLOAD_ROUTE = "/api/pdf"
CODE_IMAGE_ROUTE = "/uploads/qrcodes"


def build_download_url(origin: str, file_id: str) -> str:
    return f"{origin.rstrip('/')}{DOWNLOAD_ROUTE}/{file_id}"


def build_code_image_url(origin: str, code_image_path: str) -> str:
    name = PurePosixPath(code_image_path.replace("\\", "/")).name
    return f"{origin.rstrip('/')}{CODE_IMAGE_ROUTE}/{name}"


def record_to_uploaded_dto(record: FileRecord, origin: str) -> UploadedFileDTO:
    return UploadedFileDTO(
        id=record.id,
        name=record.original_name,
        size=record.file_size,
        code_image_url=build_code_image_url(origin, record.code_image_path),
        download_url=build_download_url(origin, record.id),
        upload_date=record.upload_date,
    )


def record_to_info_dto(record: FileRecord) -> FileInfoDTO:
    return FileInfoDTO(
        id=record.id,
        original_name=record.original_name,
        file_size=record.file_size,
        upload_date=record.upload_date,
        download_count=record.download_count,
        last_accessed=record.last_accessed,
    )


def record_to_list_item_dto(record: FileRecord, origin: str) -> FileListItemDTO:
    return FileListItemDTO(
        id=record.id,
        original_name=record.original_name,
        file_size=record.file_size,
        upload_date=record.upload_date,
        download_count=record.download_count,
        code_image_url=build_code_image_url(origin, record.code_image_path),
        download_url=build_download_url(origin, record.id),
    )


def record_to_recent_dto(record: FileRecord) -> RecentFileDTO:
    return RecentFileDTO(
        id=record.id,
        original_name=record.original_name,
        upload_date=record.upload_date,
        download_count=record.download_count,
    )

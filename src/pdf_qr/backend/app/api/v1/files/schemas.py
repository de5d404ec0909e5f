from __future__ import annotations

from datetime import datetime
from typing import Optional

from pdf_qr.backend.app.api.v1.schemas import CamelModel


class UploadedFileResponse(CamelModel):
    id: str
    name: str
    size: int
    qr_code: str
    download_url: str
    upload_date: datetime


class UploadResponse(CamelModel):
    success: bool = True
    message: str
    files: list[UploadedFileResponse]


class FileInfoResponse(CamelModel):
    id: str
    original_name: str
    file_size: int
    upload_date: datetime
    download_count: int
    last_accessed: Optional[datetime] = None


class FileListItemResponse(CamelModel):
    id: str
    original_name: str
    file_size: int
    upload_date: datetime
    download_count: int
    qr_code: str
    download_url: str


class PaginationResponse(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class FileListResponse(CamelModel):
    files: list[FileListItemResponse]
    pagination: PaginationResponse


class RecentFileResponse(CamelModel):
    id: str
    original_name: str
    upload_date: datetime
    download_count: int


class StatsResponse(CamelModel):
    total_files: int
    total_downloads: int
    today_uploads: int
    recent_files: list[RecentFileResponse]

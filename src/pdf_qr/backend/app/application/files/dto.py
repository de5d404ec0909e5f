from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class IncomingFileDTO:
    filename: str
    content_type: str
    content: bytes


@dataclass(frozen=True)
class UploadFilesInputDTO:
    origin: str  # scheme://host used to build public URLs
    files: list[IncomingFileDTO] = field(default_factory=list)


@dataclass(frozen=True)
class FileIdInputDTO:
    file_id: str


@dataclass(frozen=True)
class ListFilesInputDTO:
    origin: str
    page: int = 1
    limit: int = 10


# ---------- OUTPUT DTOs ----------
@dataclass(frozen=True)
class UploadedFileDTO:
    id: str
    name: str
    size: int
    code_image_url: str
    download_url: str
    upload_date: datetime


@dataclass(frozen=True)
class PdfDownloadDTO:
    path: Path
    original_name: str
    download_count: int


@dataclass(frozen=True)
class CodeImageDTO:
    path: Path


@dataclass(frozen=True)
class FileInfoDTO:
    id: str
    original_name: str
    file_size: int
    upload_date: datetime
    download_count: int
    last_accessed: Optional[datetime]


@dataclass(frozen=True)
class FileListItemDTO:
    id: str
    original_name: str
    file_size: int
    upload_date: datetime
    download_count: int
    code_image_url: str
    download_url: str


@dataclass(frozen=True)
class PaginationDTO:
    page: int
    limit: int
    total: int
    pages: int


@dataclass(frozen=True)
class FileListDTO:
    files: list[FileListItemDTO]
    pagination: PaginationDTO


@dataclass(frozen=True)
class RecentFileDTO:
    id: str
    original_name: str
    upload_date: datetime
    download_count: int


@dataclass(frozen=True)
class StatsDTO:
    total_files: int
    total_downloads: int
    today_uploads: int
    recent_files: list[RecentFileDTO]

from .dto import (
    IncomingFileDTO,
    UploadFilesInputDTO,
    FileIdInputDTO,
    ListFilesInputDTO,
    UploadedFileDTO,
    PdfDownloadDTO,
    CodeImageDTO,
    FileInfoDTO,
    FileListItemDTO,
    FileListDTO,
    PaginationDTO,
    RecentFileDTO,
    StatsDTO,
)

__all__ = [
    "IncomingFileDTO",
    "UploadFilesInputDTO",
    "FileIdInputDTO",
    "ListFilesInputDTO",
    "UploadedFileDTO",
    "PdfDownloadDTO",
    "CodeImageDTO",
    "FileInfoDTO",
    "FileListItemDTO",
    "FileListDTO",
    "PaginationDTO",
    "RecentFileDTO",
    "StatsDTO",
]

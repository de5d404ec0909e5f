from .upload_files import UploadFilesUseCase, UploadLimits
from .fetch_pdf import FetchPdfUseCase
from .fetch_code_image import FetchCodeImageUseCase
from .get_file_info import GetFileInfoUseCase
from .list_files import ListFilesUseCase
from .get_stats import GetStatsUseCase
from .delete_file import DeleteFileUseCase

__all__ = [
    "UploadFilesUseCase",
    "UploadLimits",
    "FetchPdfUseCase",
    "FetchCodeImageUseCase",
    "GetFileInfoUseCase",
    "ListFilesUseCase",
    "GetStatsUseCase",
    "DeleteFileUseCase",
]

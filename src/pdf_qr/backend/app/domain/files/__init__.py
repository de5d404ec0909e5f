from .entities import FileRecord, StoredFileInfo
from .repositories import FileRecordRepository

__all__ = [
    "FileRecord",
    "StoredFileInfo",
    "FileRecordRepository",
]

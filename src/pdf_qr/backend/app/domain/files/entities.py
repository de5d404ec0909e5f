from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..common import utcnow


@dataclass
class StoredFileInfo:
    original_filename: str
    stored_filename: str
    storage_path: str
    size_bytes: int
    content_type: str


@dataclass
class FileRecord:
    id: str
    original_name: str
    stored_name: str
    storage_path: str  # relative to the storage root
    file_size: int
    mime_type: str
    code_image_path: str  # relative to the storage root
    upload_date: datetime = field(default_factory=utcnow)
    download_count: int = 0
    last_accessed: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.last_accessed is None:
            self.last_accessed = self.upload_date

    def register_download(self, at: Optional[datetime] = None) -> None:
        self.download_count += 1
        self.last_accessed = at or utcnow()

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .entities import FileRecord


class FileRecordRepository(Protocol):
    async def add(self, record: FileRecord) -> FileRecord:
        ...

    async def get_by_id(self, file_id: str) -> Optional[FileRecord]:
        ...

    async def register_download(self, file_id: str, accessed_at: datetime) -> None:
        ...

    async def delete(self, file_id: str) -> None:
        ...

    async def list_page(self, *, offset: int, limit: int) -> Sequence[FileRecord]:
        ...

    async def count(self) -> int:
        ...

    async def total_downloads(self) -> int:
        ...

    async def count_uploaded_since(self, since: datetime) -> int:
        ...

    async def recent(self, limit: int) -> Sequence[FileRecord]:
        ...

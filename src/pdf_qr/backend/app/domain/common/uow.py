from types import TracebackType
from typing import Protocol, Optional

from pdf_qr.backend.app.domain.files.repositories import FileRecordRepository


class UnitOfWork(Protocol):
    file_repo: FileRecordRepository

    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...

    async def __aenter__(self) -> "UnitOfWork": ...

    async def __aexit__(
            self,
            exc_type: Optional[type[BaseException]],
            exc: Optional[BaseException],
            tb: Optional[TracebackType],
    ) -> None: ...

from pathlib import Path
from typing import Protocol, runtime_checkable

from pdf_qr.backend.app.domain.files.entities import StoredFileInfo


@runtime_checkable
class FileStorage(Protocol):
    @property
    def code_image_dir(self) -> Path:
        ...

    async def save(
        self,
        *,
        filename: str,
        content: bytes,
        content_type: str,
    ) -> StoredFileInfo:
        ...

    def resolve(self, storage_path: str) -> Path:
        """
        storage_path MUST be a relative path previously returned by save()
        or relative_path()
        """
        ...

    def relative_path(self, path: Path) -> str:
        ...

    async def exists(self, storage_path: str) -> bool:
        ...

    async def delete(self, storage_path: str) -> None:
        """Missing files are ignored."""
        ...


class CodeImageGenerator(Protocol):
    async def generate(self, *, url: str, target_dir: Path) -> Path:
        ...


class IdGenerator(Protocol):
    def new_id(self) -> str:
        ...

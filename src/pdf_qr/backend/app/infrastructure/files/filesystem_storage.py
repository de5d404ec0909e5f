from __future__ import annotations

from pathlib import Path
from uuid import uuid4

import anyio

from pdf_qr.backend.app.domain.files import StoredFileInfo

PDF_DIR_NAME = "pdfs"
CODE_IMAGE_DIR_NAME = "qrcodes"


class FilesystemFileStorage:
    """
    Keeps uploads under one root, partitioned by type:

        <base_dir>/pdfs/<uuid>.pdf
        <base_dir>/qrcodes/<name>.png

    Paths handed out are relative to base_dir and use forward slashes.
    """

    def __init__(self, base_dir: Path) -> None:
        self._base_dir = Path(base_dir)
        self._pdf_dir = self._base_dir / PDF_DIR_NAME
        self._code_image_dir = self._base_dir / CODE_IMAGE_DIR_NAME

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    @property
    def code_image_dir(self) -> Path:
        return self._code_image_dir

    def ensure_dirs(self) -> None:
        self._pdf_dir.mkdir(parents=True, exist_ok=True)
        self._code_image_dir.mkdir(parents=True, exist_ok=True)

    async def save(
        self,
        *,
        filename: str,
        content: bytes,
        content_type: str,
    ) -> StoredFileInfo:
        # stored name never derives from the client name beyond the extension
        ext = Path(filename).suffix.lower()
        if ext != ".pdf":
            ext = ".pdf"
        stored_filename = f"{uuid4().hex}{ext}"
        full_path = self._pdf_dir / stored_filename

        def _write() -> int:
            self._pdf_dir.mkdir(parents=True, exist_ok=True)
            with open(full_path, "xb") as f:
                f.write(content)
            return full_path.stat().st_size

        size = await anyio.to_thread.run_sync(_write)

        return StoredFileInfo(
            original_filename=filename,
            stored_filename=stored_filename,
            storage_path=self.relative_path(full_path),
            size_bytes=size,
            content_type=content_type,
        )

    def resolve(self, storage_path: str) -> Path:
        full_path = (self._base_dir / storage_path).resolve()
        if not full_path.is_relative_to(self._base_dir.resolve()):
            raise ValueError(f"Path {storage_path!r} escapes the storage root")
        return full_path

    def relative_path(self, path: Path) -> str:
        return Path(path).resolve().relative_to(self._base_dir.resolve()).as_posix()

    async def exists(self, storage_path: str) -> bool:
        path = self.resolve(storage_path)
        return await anyio.to_thread.run_sync(path.is_file)

    async def delete(self, storage_path: str) -> None:
        path = self.resolve(storage_path)
        await anyio.to_thread.run_sync(lambda: path.unlink(missing_ok=True))

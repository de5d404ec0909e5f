from __future__ import annotations

import logging
from dataclasses import dataclass

from pdf_qr.backend.app.application.files.dto import IncomingFileDTO, UploadFilesInputDTO, UploadedFileDTO
from pdf_qr.backend.app.application.files.mappers import build_download_url, record_to_uploaded_dto
from pdf_qr.backend.app.domain.common.uow import UnitOfWork
from pdf_qr.backend.app.domain.files import FileRecord
from pdf_qr.backend.app.domain.files.errors import (
    DuplicateFileId,
    FailedToStoreUpload,
    FileTooLarge,
    NoFilesUploaded,
    TooManyFiles,
    UnsupportedFileType,
)
from pdf_qr.backend.app.domain.files.interfaces import CodeImageGenerator, FileStorage, IdGenerator

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"


@dataclass(frozen=True)
class UploadLimits:
    max_files: int = 10
    max_file_size: int = 50 * 1024 * 1024


def is_pdf(content_type: str) -> bool:
    return content_type.split(";", 1)[0].strip().lower() == PDF_CONTENT_TYPE


class UploadFilesUseCase:
    def __init__(
        self,
        uow: UnitOfWork,
        file_storage: FileStorage,
        code_images: CodeImageGenerator,
        id_generator: IdGenerator,
        limits: UploadLimits = UploadLimits(),
    ) -> None:
        self._uow = uow
        self._file_storage = file_storage
        self._code_images = code_images
        self._ids = id_generator
        self._limits = limits

    async def execute(self, dto: UploadFilesInputDTO) -> list[UploadedFileDTO]:
        # the whole request is rejected before anything touches disk or db
        self._validate(dto.files)

        written: list[str] = []
        saved: list[FileRecord] = []
        current = ""
        try:
            async with self._uow:
                for incoming in dto.files:
                    current = incoming.filename
                    record = await self._store_files(incoming, dto.origin, written)
                    saved.append(await self._uow.file_repo.add(record))
        except DuplicateFileId:
            await self._cleanup(written)
            raise
        except Exception as e:
            # db rows are rolled back by the UoW, the files are ours to remove
            logger.exception("Upload of %s failed, removing %d stored files", current, len(written))
            await self._cleanup(written)
            raise FailedToStoreUpload(current) from e

        logger.info("Uploaded %d file(s): %s", len(saved), ", ".join(r.id for r in saved))
        return [record_to_uploaded_dto(r, dto.origin) for r in saved]

    def _validate(self, files: list[IncomingFileDTO]) -> None:
        if not files:
            raise NoFilesUploaded()
        if len(files) > self._limits.max_files:
            raise TooManyFiles(self._limits.max_files)
        for f in files:
            if not is_pdf(f.content_type):
                raise UnsupportedFileType(f.filename)
            if len(f.content) > self._limits.max_file_size:
                raise FileTooLarge(f.filename, self._limits.max_file_size)

    async def _store_files(
        self,
        incoming: IncomingFileDTO,
        origin: str,
        written: list[str],
    ) -> FileRecord:
        file_id = self._ids.new_id()

        # 1) the pdf itself
        stored = await self._file_storage.save(
            filename=incoming.filename,
            content=incoming.content,
            content_type=incoming.content_type,
        )
        written.append(stored.storage_path)

        # 2) QR code pointing at the public download route
        download_url = build_download_url(origin, file_id)
        image_path = await self._code_images.generate(
            url=download_url,
            target_dir=self._file_storage.code_image_dir,
        )
        code_image_path = self._file_storage.relative_path(image_path)
        written.append(code_image_path)

        return FileRecord(
            id=file_id,
            original_name=incoming.filename,
            stored_name=stored.stored_filename,
            storage_path=stored.storage_path,
            file_size=stored.size_bytes,
            mime_type=stored.content_type,
            code_image_path=code_image_path,
        )

    async def _cleanup(self, paths: list[str]) -> None:
        for path in paths:
            try:
                await self._file_storage.delete(path)
            except Exception:
                logger.warning("Could not remove %s after failed upload", path, exc_info=True)

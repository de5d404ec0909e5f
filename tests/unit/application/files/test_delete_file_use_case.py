import pytest

from pdf_qr.backend.app.application.files import FileIdInputDTO
from pdf_qr.backend.app.application.files.use_cases import (
    DeleteFileUseCase,
    FetchCodeImageUseCase,
    FetchPdfUseCase,
    GetFileInfoUseCase,
)
from pdf_qr.backend.app.domain.files.errors import FileRecordNotFound
from tests.unit.fakes.file_storage import FakeFileStorage
from tests.unit.fakes.records import seed_record


pytestmark = pytest.mark.asyncio


async def test_delete_removes_files_and_record(uow, storage):
    await seed_record(uow, storage, file_id="abc")
    await seed_record(uow, storage, file_id="keep")

    await DeleteFileUseCase(uow, storage).execute(FileIdInputDTO(file_id="abc"))

    assert uow.committed is True
    assert await uow.file_repo.get_by_id("abc") is None
    assert set(storage.files) == {"pdfs/keep.pdf", "qrcodes/qr_keep.png"}


async def test_deleted_file_is_gone_everywhere(uow, storage):
    await seed_record(uow, storage, file_id="abc")
    await DeleteFileUseCase(uow, storage).execute(FileIdInputDTO(file_id="abc"))

    dto = FileIdInputDTO(file_id="abc")
    with pytest.raises(FileRecordNotFound):
        await FetchPdfUseCase(uow, storage).execute(dto)
    with pytest.raises(FileRecordNotFound):
        await FetchCodeImageUseCase(uow, storage).execute(dto)
    with pytest.raises(FileRecordNotFound):
        await GetFileInfoUseCase(uow).execute(dto)


async def test_delete_unknown_id(uow, storage):
    with pytest.raises(FileRecordNotFound):
        await DeleteFileUseCase(uow, storage).execute(FileIdInputDTO(file_id="nope"))


async def test_record_is_deleted_even_if_files_cannot_be(uow):
    storage = FakeFileStorage(raise_on_delete=PermissionError("read-only"))
    await seed_record(uow, storage, file_id="abc")

    await DeleteFileUseCase(uow, storage).execute(FileIdInputDTO(file_id="abc"))

    assert await uow.file_repo.get_by_id("abc") is None


async def test_delete_tolerates_files_already_gone(uow, storage):
    await seed_record(uow, storage, file_id="abc", with_files=False)

    await DeleteFileUseCase(uow, storage).execute(FileIdInputDTO(file_id="abc"))

    assert await uow.file_repo.count() == 0

from datetime import datetime, timedelta, timezone

import pytest

from pdf_qr.backend.app.domain.files import FileRecord
from pdf_qr.backend.app.domain.files.errors import DuplicateFileId


pytestmark = pytest.mark.asyncio

T0 = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_record(file_id: str, *, upload_date: datetime = T0, downloads: int = 0) -> FileRecord:
    return FileRecord(
        id=file_id,
        original_name=f"{file_id}.pdf",
        stored_name=f"stored-{file_id}.pdf",
        storage_path=f"pdfs/stored-{file_id}.pdf",
        file_size=2048,
        mime_type="application/pdf",
        code_image_path=f"qrcodes/qr_{file_id}.png",
        upload_date=upload_date,
        download_count=downloads,
    )


async def seed(uow, *records: FileRecord) -> None:
    async with uow:
        for record in records:
            await uow.file_repo.add(record)


async def test_add_and_get_round_trip(uow, fresh_uow):
    await seed(uow, make_record("abc"))

    async with fresh_uow:
        saved = await fresh_uow.file_repo.get_by_id("abc")

    assert saved is not None
    assert saved.original_name == "abc.pdf"
    assert saved.storage_path == "pdfs/stored-abc.pdf"
    assert saved.code_image_path == "qrcodes/qr_abc.png"
    assert saved.file_size == 2048
    assert saved.download_count == 0
    assert saved.upload_date == T0
    assert saved.upload_date.tzinfo is not None
    assert saved.last_accessed == T0


async def test_get_unknown_returns_none(uow):
    async with uow:
        assert await uow.file_repo.get_by_id("missing") is None


async def test_duplicate_id_is_rejected_and_rolled_back(uow, fresh_uow):
    await seed(uow, make_record("abc"))

    duplicate = make_record("abc")
    duplicate.storage_path = "pdfs/other.pdf"
    duplicate.stored_name = "other.pdf"
    duplicate.code_image_path = "qrcodes/other.png"
    with pytest.raises(DuplicateFileId):
        await seed(fresh_uow, make_record("zzz"), duplicate)

    # the whole batch is gone, not just the clashing row
    async with fresh_uow:
        assert await fresh_uow.file_repo.count() == 1
        saved = await fresh_uow.file_repo.get_by_id("abc")
    assert saved.storage_path == "pdfs/stored-abc.pdf"


async def test_register_download_increments_in_place(uow, fresh_uow):
    await seed(uow, make_record("abc"))
    accessed = T0 + timedelta(hours=2)

    for _ in range(3):
        async with uow:
            await uow.file_repo.register_download("abc", accessed)

    async with fresh_uow:
        saved = await fresh_uow.file_repo.get_by_id("abc")
    assert saved.download_count == 3
    assert saved.last_accessed == accessed


async def test_register_download_is_visible_in_same_session(uow):
    await seed(uow, make_record("abc"))

    async with uow:
        before = await uow.file_repo.get_by_id("abc")
        await uow.file_repo.register_download("abc", T0)
        after = await uow.file_repo.get_by_id("abc")

    assert before.download_count == 0
    assert after.download_count == 1


async def test_delete(uow, fresh_uow):
    await seed(uow, make_record("abc"), make_record("keep"))

    async with uow:
        await uow.file_repo.delete("abc")

    async with fresh_uow:
        assert await fresh_uow.file_repo.get_by_id("abc") is None
        assert await fresh_uow.file_repo.count() == 1


async def test_list_page_is_newest_first(uow):
    records = [make_record(f"r{i:02d}", upload_date=T0 + timedelta(minutes=i)) for i in range(1, 16)]
    await seed(uow, *records)

    async with uow:
        first = await uow.file_repo.list_page(offset=0, limit=10)
        second = await uow.file_repo.list_page(offset=10, limit=10)
        total = await uow.file_repo.count()

    assert total == 15
    assert [r.id for r in first] == [f"r{i:02d}" for i in range(15, 5, -1)]
    assert [r.id for r in second] == [f"r{i:02d}" for i in range(5, 0, -1)]


async def test_totals_and_uploads_since(uow):
    await seed(
        uow,
        make_record("old", upload_date=T0 - timedelta(days=3), downloads=5),
        make_record("new", upload_date=T0, downloads=2),
        make_record("newer", upload_date=T0 + timedelta(hours=1)),
    )

    async with uow:
        total_downloads = await uow.file_repo.total_downloads()
        since = await uow.file_repo.count_uploaded_since(T0)
        since_other_tz = await uow.file_repo.count_uploaded_since(
            T0.astimezone(timezone(timedelta(hours=-5)))
        )
        recent = await uow.file_repo.recent(2)

    assert total_downloads == 7
    assert since == 2
    assert since_other_tz == 2
    assert [r.id for r in recent] == ["newer", "new"]


async def test_total_downloads_on_empty_table_is_zero(uow):
    async with uow:
        assert await uow.file_repo.total_downloads() == 0
        assert await uow.file_repo.recent(5) == []

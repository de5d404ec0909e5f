import pytest

from pdf_qr.backend.app.infrastructure.files.filesystem_storage import FilesystemFileStorage


pytestmark = pytest.mark.asyncio


async def test_save_writes_under_pdfs_with_generated_name(tmp_path, pdf_bytes):
    storage = FilesystemFileStorage(tmp_path)

    stored = await storage.save(filename="../../etc/report.PDF", content=pdf_bytes, content_type="application/pdf")

    assert stored.original_filename == "../../etc/report.PDF"
    assert stored.stored_filename.endswith(".pdf")
    assert "report" not in stored.stored_filename
    assert stored.storage_path == f"pdfs/{stored.stored_filename}"
    assert stored.size_bytes == len(pdf_bytes)
    assert (tmp_path / "pdfs" / stored.stored_filename).read_bytes() == pdf_bytes


async def test_two_saves_of_same_name_do_not_collide(tmp_path, pdf_bytes):
    storage = FilesystemFileStorage(tmp_path)

    a = await storage.save(filename="same.pdf", content=b"a", content_type="application/pdf")
    b = await storage.save(filename="same.pdf", content=b"b", content_type="application/pdf")

    assert a.storage_path != b.storage_path
    assert (tmp_path / a.storage_path).read_bytes() == b"a"
    assert (tmp_path / b.storage_path).read_bytes() == b"b"


async def test_exists_and_delete(tmp_path, pdf_bytes):
    storage = FilesystemFileStorage(tmp_path)
    stored = await storage.save(filename="x.pdf", content=pdf_bytes, content_type="application/pdf")

    assert await storage.exists(stored.storage_path) is True
    await storage.delete(stored.storage_path)
    assert await storage.exists(stored.storage_path) is False
    # already gone
    await storage.delete(stored.storage_path)


async def test_relative_path_and_resolve_round_trip(tmp_path):
    storage = FilesystemFileStorage(tmp_path)
    storage.ensure_dirs()
    image = storage.code_image_dir / "qr_1.png"

    rel = storage.relative_path(image)

    assert rel == "qrcodes/qr_1.png"
    assert storage.resolve(rel) == image.resolve()


async def test_resolve_refuses_paths_outside_root(tmp_path):
    storage = FilesystemFileStorage(tmp_path / "uploads")

    with pytest.raises(ValueError):
        storage.resolve("../secrets.txt")

from io import BytesIO

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from pdf_qr.backend.app.api.v1.files.mappers import get_upload_input_dto, read_upload
from pdf_qr.backend.app.application.files.use_cases import UploadLimits
from pdf_qr.backend.app.domain.files.errors import FileTooLarge, TooManyFiles


pytestmark = pytest.mark.asyncio

PDF_HEADERS = Headers({"content-type": "application/pdf"})


class TrackingFile(BytesIO):
    """Remembers how many bytes were asked for on each read."""

    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        self.requested: list[int] = []

    def read(self, size: int = -1) -> bytes:
        self.requested.append(size)
        return super().read(size)


def upload_file(data: bytes, *, name: str = "a.pdf", declared_size=None) -> UploadFile:
    return UploadFile(TrackingFile(data), size=declared_size, filename=name, headers=PDF_HEADERS)


async def test_declared_oversize_part_is_rejected_without_reading():
    f = upload_file(b"x" * 64, declared_size=64)

    with pytest.raises(FileTooLarge):
        await read_upload(f, max_file_size=10)

    assert f.file.requested == []


async def test_undeclared_oversize_part_reads_at_most_limit_plus_one():
    f = upload_file(b"x" * 10_000)

    with pytest.raises(FileTooLarge) as exc_info:
        await read_upload(f, max_file_size=100)

    assert f.file.requested == [101]
    assert exc_info.value.filename == "a.pdf"


async def test_part_at_the_limit_is_read_whole():
    f = upload_file(b"%PDF-1.4 ok", declared_size=11)

    assert await read_upload(f, max_file_size=11) == b"%PDF-1.4 ok"


async def test_too_many_parts_are_rejected_before_any_read():
    files = [upload_file(b"%PDF") for _ in range(3)]

    with pytest.raises(TooManyFiles):
        await get_upload_input_dto("http://testserver", files, UploadLimits(max_files=2))

    assert all(f.file.requested == [] for f in files)


async def test_mapping_keeps_name_type_and_content():
    dto = await get_upload_input_dto(
        "http://testserver",
        [upload_file(b"%PDF-1.4", name="report.pdf")],
        UploadLimits(),
    )

    assert dto.origin == "http://testserver"
    assert [(f.filename, f.content_type, f.content) for f in dto.files] == [
        ("report.pdf", "application/pdf", b"%PDF-1.4")
    ]

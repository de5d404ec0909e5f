import pytest

from tests.unit.fakes.code_images import FakeCodeImageGenerator
from tests.unit.fakes.file_storage import FakeFileStorage
from tests.unit.fakes.hasher import FakePasswordHasher
from tests.unit.fakes.id_generator import SequentialIdGenerator
from tests.unit.fakes.uow import FakeUnitOfWork


@pytest.fixture
def uow() -> FakeUnitOfWork:
    return FakeUnitOfWork()


@pytest.fixture
def hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def storage() -> FakeFileStorage:
    return FakeFileStorage()


@pytest.fixture
def code_images(storage) -> FakeCodeImageGenerator:
    return FakeCodeImageGenerator(storage)


@pytest.fixture
def ids() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def pdf_bytes() -> bytes:
    return b"%PDF-1.4\n1 0 obj << /Type /Catalog >> endobj\ntrailer << /Root 1 0 R >>\n%%EOF\n"

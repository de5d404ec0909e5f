import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from pdf_qr.backend.app.infrastructure.db import (
    SqlAlchemyUnitOfWork,
    build_engine,
    build_session_factory,
    init_db,
)


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    # one throwaway sqlite file per test
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(db_engine) -> AsyncSession:
    async with build_session_factory(db_engine)() as session:
        yield session


@pytest_asyncio.fixture
async def uow(session) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session)


@pytest_asyncio.fixture
async def fresh_uow(db_engine):
    """A second unit of work on its own session, to see only committed state."""
    async with build_session_factory(db_engine)() as session:
        yield SqlAlchemyUnitOfWork(session)

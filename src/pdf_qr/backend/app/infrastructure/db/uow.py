# app/infrastructure/db/uow.py
from sqlalchemy.ext.asyncio import AsyncSession

from pdf_qr.backend.app.infrastructure.files.repositories import SqlAlchemyFileRecordRepository


class SqlAlchemyUnitOfWork:
    def __init__(self, session: AsyncSession):
        self._session = session
        self.file_repo = SqlAlchemyFileRecordRepository(session)

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        await self._session.rollback()

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc:
            await self.rollback()
        else:
            await self.commit()

from sqlalchemy.ext.asyncio import AsyncEngine

from pdf_qr.backend.app.infrastructure.db.base import Base
from pdf_qr.backend.app.infrastructure.db.models import FileRecordModel  # noqa: F401


async def init_db(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Annotated, AsyncIterator, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pdf_qr.backend.app.application.auth.interfaces import PasswordHasher
from pdf_qr.backend.app.application.files.use_cases import UploadLimits
from pdf_qr.backend.app.core.config import Settings
from pdf_qr.backend.app.core.security import BcryptPasswordHasher
from pdf_qr.backend.app.domain.auth import SessionStore
from pdf_qr.backend.app.domain.auth.value_objects import AdminCredentials
from pdf_qr.backend.app.domain.common.uow import UnitOfWork
from pdf_qr.backend.app.domain.files.interfaces import CodeImageGenerator, FileStorage, IdGenerator
from pdf_qr.backend.app.infrastructure.auth.session_store import InMemorySessionStore
from pdf_qr.backend.app.infrastructure.db.uow import SqlAlchemyUnitOfWork
from pdf_qr.backend.app.infrastructure.files.filesystem_storage import FilesystemFileStorage
from pdf_qr.backend.app.infrastructure.files.identifiers import TimestampIdGenerator
from pdf_qr.backend.app.infrastructure.files.qr_code_generator import QrCodeImageGenerator


@dataclass
class AppContainer:
    """Everything the request handlers share, built once per app."""
    settings: Settings
    file_storage: FilesystemFileStorage
    code_images: CodeImageGenerator
    id_generator: IdGenerator
    session_store: SessionStore
    password_hasher: PasswordHasher
    # set by the lifespan once the engine exists
    session_factory: Optional[async_sessionmaker[AsyncSession]] = field(default=None)

    @property
    def admin_credentials(self) -> AdminCredentials:
        return AdminCredentials(
            username=self.settings.ADMIN_USERNAME,
            password_hash=self.settings.ADMIN_PASSWORD_HASH,
        )

    @property
    def upload_limits(self) -> UploadLimits:
        return UploadLimits(
            max_files=self.settings.MAX_FILES_PER_UPLOAD,
            max_file_size=self.settings.MAX_FILE_SIZE_BYTES,
        )

    @property
    def session_ttl(self) -> timedelta:
        return timedelta(hours=self.settings.SESSION_TTL_HOURS)


def build_container(
    settings: Settings,
    *,
    session_store: Optional[SessionStore] = None,
    password_hasher: Optional[PasswordHasher] = None,
) -> AppContainer:
    """
    Swap implementations here (session backend, hasher) without touching
    use cases. A multi-instance deployment passes a shared session_store.
    """
    return AppContainer(
        settings=settings,
        file_storage=FilesystemFileStorage(Path(settings.FILE_STORAGE_DIR)),
        code_images=QrCodeImageGenerator(),
        id_generator=TimestampIdGenerator(),
        session_store=session_store or InMemorySessionStore(),
        password_hasher=password_hasher or BcryptPasswordHasher(),
    )


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


ContainerDep = Annotated[AppContainer, Depends(get_container)]


def get_app_settings(container: ContainerDep) -> Settings:
    return container.settings


async def get_session(container: ContainerDep) -> AsyncIterator[AsyncSession]:
    if container.session_factory is None:
        raise RuntimeError("Database is not initialised")
    async with container.session_factory() as session:
        yield session


async def get_uow(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> AsyncIterator[UnitOfWork]:
    # the transaction lifecycle (commit/rollback) is handled by UnitOfWork
    uow = SqlAlchemyUnitOfWork(session)
    yield uow


def get_file_storage(container: ContainerDep) -> FileStorage:
    return container.file_storage


def get_code_image_generator(container: ContainerDep) -> CodeImageGenerator:
    return container.code_images


def get_id_generator(container: ContainerDep) -> IdGenerator:
    return container.id_generator


def get_session_store(container: ContainerDep) -> SessionStore:
    return container.session_store


def get_origin(request: Request, container: ContainerDep) -> str:
    """scheme://host[:port] used for every public URL we hand out."""
    if container.settings.PUBLIC_BASE_URL:
        return container.settings.PUBLIC_BASE_URL.rstrip("/")
    return str(request.base_url).rstrip("/")

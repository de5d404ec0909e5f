import asyncio
import logging
from contextlib import asynccontextmanager, suppress
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from pdf_qr.backend.app.api.v1.router import api_router
from pdf_qr.backend.app.application.files.mappers import CODE_IMAGE_ROUTE
from pdf_qr.backend.app.core.config import Settings, get_settings
from pdf_qr.backend.app.core.deps import AppContainer, build_container
from pdf_qr.backend.app.core.logging_config import configure_logging
from pdf_qr.backend.app.exception_handlers import register_exception_handlers
from pdf_qr.backend.app.infrastructure.auth.session_store import (
    InMemorySessionStore,
    purge_expired_sessions_forever,
)
from pdf_qr.backend.app.infrastructure.db import build_engine, build_session_factory, init_db

logger = logging.getLogger(__name__)


def create_app(
        settings: Optional[Settings] = None,
        *,
        container: Optional[AppContainer] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)
    container = container or build_container(settings)
    container.file_storage.ensure_dirs()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = build_engine(settings.DATABASE_URL)
        await init_db(engine)
        container.session_factory = build_session_factory(engine)

        purge_task = None
        if isinstance(container.session_store, InMemorySessionStore):
            purge_task = asyncio.create_task(purge_expired_sessions_forever(container.session_store))
        app.state.purge_task = purge_task

        logger.info(
            "Serving uploads from %s (auth %s)",
            container.file_storage.base_dir,
            "required" if settings.REQUIRE_AUTH else "disabled",
        )
        yield

        if purge_task is not None:
            purge_task.cancel()
            with suppress(asyncio.CancelledError):
                await purge_task
        await engine.dispose()

    app = FastAPI(title="PDF QR Host", version="1.0.0", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")
    app.mount(
        CODE_IMAGE_ROUTE,
        StaticFiles(directory=str(container.file_storage.code_image_dir)),
        name="qrcodes",
    )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    register_exception_handlers(app)
    return app

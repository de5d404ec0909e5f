import logging

import uvicorn

from pdf_qr.backend.app.core.config import get_settings

logger = logging.getLogger(__name__)


def run() -> None:
    settings = get_settings()
    if settings.REQUIRE_AUTH and not settings.ADMIN_PASSWORD_HASH:
        logger.warning("ADMIN_PASSWORD_HASH is empty, admin login will always fail")
    uvicorn.run(
        "pdf_qr.backend.app.main:create_app",
        factory=True,
        host=settings.HOST,
        port=settings.PORT,
    )

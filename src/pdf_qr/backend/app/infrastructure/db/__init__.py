from pdf_qr.backend.app.infrastructure.db.base import Base
from pdf_qr.backend.app.infrastructure.db.engine import build_engine
from pdf_qr.backend.app.infrastructure.db.init_db import init_db
from pdf_qr.backend.app.infrastructure.db.session import build_session_factory
from pdf_qr.backend.app.infrastructure.db.uow import SqlAlchemyUnitOfWork

__all__ = ['init_db', 'Base', 'build_engine', 'build_session_factory', 'SqlAlchemyUnitOfWork']

from __future__ import annotations

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pdf_qr.backend.app.infrastructure.db.base import Base


class FileRecordModel(Base):
    __tablename__ = "file_records"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    original_name: Mapped[str] = mapped_column(String(512), nullable=False)
    stored_name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    storage_path: Mapped[str] = mapped_column(String(1024), nullable=False, unique=True)
    file_size: Mapped[int] = mapped_column(BigInteger, nullable=False)
    mime_type: Mapped[str] = mapped_column(String(128), nullable=False)
    code_image_path: Mapped[str] = mapped_column(String(1024), nullable=False, unique=True)
    upload_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    download_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_accessed: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
